"""Load staccato configuration from pyproject.toml and optional .staccato.toml."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from .bounds import PercentileBounds
from .errors import ConfigError


@dataclass
class StaccatoConfig:
    """Runtime configuration for staccato."""

    # Percentile window for the reported lower/upper values.
    # 0 and 100 (the defaults) report the true minimum and maximum.
    lower_percentile: float = 0.0
    upper_percentile: float = 100.0

    # Extra blocks summarizing the lowest N percent of the sorted values,
    # e.g. [90, 99] adds count_90 ... stddev_99.  Each entry is 1..99.
    # An empty list prints only the main summary (the default).
    slice_percentiles: List[int] = field(default_factory=list)

    # Fixed number of decimals for float values in the report.
    # None prints the shortest representation that round-trips.
    precision: Optional[int] = None

    def bounds(self) -> PercentileBounds:
        """Return the validated percentile window; raises ConfigError."""
        return PercentileBounds(self.lower_percentile, self.upper_percentile)

    def validate(self) -> None:
        """Raise ConfigError if any setting is unusable."""
        self.bounds()
        self.slice_percentiles = validate_slice_percents(self.slice_percentiles)
        if self.precision is not None and (
            isinstance(self.precision, bool)
            or not isinstance(self.precision, int)
            or self.precision < 0
        ):
            raise ConfigError(
                f"precision must be a non-negative integer, got {self.precision!r}"
            )


def validate_slice_percents(values: Sequence[int]) -> List[int]:
    """Return *values* as a list, raising ConfigError for anything outside 1..99."""
    if not isinstance(values, (list, tuple)):
        raise ConfigError(f"slice percentiles must be a list, got {values!r}")
    result = []
    for value in values:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"slice percentile must be an integer, got {value!r}")
        if not 1 <= value <= 99:
            raise ConfigError(f"slice percentile must be between 1 and 99, got {value}")
        result.append(value)
    return result


def parse_percent_list(text: str) -> List[int]:
    """Parse a comma separated list such as ``"75,90,99"``."""
    result = []
    for item in text.split(","):
        item = item.strip()
        if not item:
            continue
        try:
            result.append(int(item))
        except ValueError:
            raise ConfigError(f"invalid slice percentile: {item!r}") from None
    return validate_slice_percents(result)


def _read_toml(path: Path) -> dict:
    """Read a TOML file; return empty dict if missing or unparseable."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError, UnicodeDecodeError):
        return {}


def _apply(cfg: StaccatoConfig, d: dict) -> None:
    """Overlay dict values onto cfg, ignoring unknown keys."""
    valid = set(cfg.__dataclass_fields__)
    for key, val in d.items():
        if key in valid:
            setattr(cfg, key, val)


def load_config(project_root: Optional[Path] = None) -> StaccatoConfig:
    """Load config from pyproject.toml [tool.staccato], then .staccato.toml."""
    if project_root is None:
        project_root = Path.cwd()
    cfg = StaccatoConfig()
    pyproject = _read_toml(project_root / "pyproject.toml")
    _apply(cfg, pyproject.get("tool", {}).get("staccato", {}))
    local = _read_toml(project_root / ".staccato.toml")
    _apply(cfg, local)
    return cfg
