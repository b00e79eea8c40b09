"""Percentile window used to restrict the reported min/max."""

import math
from dataclasses import dataclass

from .errors import ConfigError

FULL_LOWER = 0.0
FULL_UPPER = 100.0


@dataclass(frozen=True)
class PercentileBounds:
    """A validated (lower, upper) pair of percentages.

    Construction fails with ConfigError unless
    ``0 <= lower <= upper <= 100``, so an invalid window can never reach the
    statistics engine.
    """

    lower: float = FULL_LOWER
    upper: float = FULL_UPPER

    def __post_init__(self) -> None:
        for name in ("lower", "upper"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"{name} percentile must be a number, got {value!r}")
            if not math.isfinite(value) or not FULL_LOWER <= value <= FULL_UPPER:
                raise ConfigError(
                    f"{name} percentile must be between 0 and 100, got {value}"
                )
        if self.lower > self.upper:
            raise ConfigError(
                f"lower percentile ({self.lower}) is greater than "
                f"upper percentile ({self.upper})"
            )
        object.__setattr__(self, "lower", float(self.lower))
        object.__setattr__(self, "upper", float(self.upper))

    @classmethod
    def full(cls) -> "PercentileBounds":
        return cls()

    @property
    def is_full_range(self) -> bool:
        """True when no percentile restriction was requested."""
        return self.lower == FULL_LOWER and self.upper == FULL_UPPER
