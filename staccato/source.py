"""Read samples from a file or stdin, one number per line."""

import math
import sys
from contextlib import contextmanager
from typing import IO, Iterable, Iterator, Optional

from .errors import InputParseError, InputReadError

# Path value meaning "read standard input".
STDIN_PATH = "-"


def parse_value(line_number: int, text: str) -> float:
    """Parse one trimmed, non-empty line; raise InputParseError on failure."""
    try:
        value = float(text)
    except ValueError:
        raise InputParseError(line_number, text) from None
    if not math.isfinite(value):
        raise InputParseError(line_number, text)
    return value


def _has_invalid_utf8(line: str) -> bool:
    """True if *line* carries undecodable bytes smuggled in by surrogateescape."""
    return any("\udc80" <= ch <= "\udcff" for ch in line)


def read_values(lines: Iterable[str]) -> Iterator[float]:
    """Lazily yield a float for every non-blank line in *lines*.

    Lines are stripped first and blank ones skipped. The first line that is
    not a finite number raises InputParseError; bytes that are not UTF-8
    raise InputReadError.
    """
    line_number = 0
    iterator = iter(lines)
    while True:
        try:
            line = next(iterator)
        except StopIteration:
            return
        except UnicodeDecodeError:
            raise InputReadError(
                f"input is not valid UTF-8 after line {line_number}"
            ) from None
        line_number += 1
        if _has_invalid_utf8(line):
            raise InputReadError(f"line {line_number}: input is not valid UTF-8")
        text = line.strip()
        if not text:
            continue
        yield parse_value(line_number, text)


def is_interactive(stream: IO[str]) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


@contextmanager
def open_input(path: Optional[str] = None) -> Iterator[IO[str]]:
    """Yield a text stream for *path*; ``None`` or ``"-"`` means stdin.

    Stdin is left open on exit. Files are opened as UTF-8 and closed; bytes
    that do not decode reach read_values escaped, so it can name the line.
    """
    if path is None or path == STDIN_PATH:
        yield sys.stdin
        return
    try:
        stream = open(path, encoding="utf-8", errors="surrogateescape")
    except OSError as exc:
        raise InputReadError(f"cannot read {path}: {exc.strerror or exc}") from exc
    with stream:
        yield stream
