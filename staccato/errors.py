"""Staccato-specific exceptions."""


class StaccatoError(Exception):
    """Base class for every failure that should end a staccato run.

    The CLI prints the message on stderr and exits non-zero; nothing is
    written to stdout once one of these has been raised.
    """


class ConfigError(StaccatoError):
    """Raised for invalid percentile bounds, slice percents or precision."""


class InputReadError(StaccatoError):
    """Raised when the input file cannot be opened."""


class InputParseError(StaccatoError):
    """Raised when a non-blank input line is not a finite number."""

    def __init__(self, line_number: int, content: str) -> None:
        super().__init__(f"line {line_number}: could not parse {content!r} as a number")
        self.line_number = line_number
        self.content = content
