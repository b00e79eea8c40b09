"""Statistics engine: turns a batch of samples into an immutable Summary."""

import math
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .bounds import PercentileBounds

# Report order of the Summary fields.
SUMMARY_FIELDS = ("count", "sum", "mean", "upper", "lower", "median", "stddev")


@dataclass(frozen=True)
class Summary:
    """Descriptive statistics for one batch of samples.

    ``None`` marks a field with no value: every field but ``count`` for an
    empty batch, and ``stddev`` for a single sample.
    """

    count: int = 0
    sum: Optional[float] = None
    mean: Optional[float] = None
    upper: Optional[float] = None
    lower: Optional[float] = None
    median: Optional[float] = None
    stddev: Optional[float] = None

    @classmethod
    def empty(cls) -> "Summary":
        return cls()

    def items(self) -> Iterator[Tuple[str, Optional[float]]]:
        """Yield (field name, value) pairs in report order."""
        for name in SUMMARY_FIELDS:
            yield name, getattr(self, name)


@dataclass(frozen=True)
class PercentileSlice:
    """Summary of the lowest *percent* percent of the sorted samples."""

    percent: int
    summary: Summary


@dataclass(frozen=True)
class Report:
    """Everything a single run prints: the main summary plus any slices."""

    summary: Summary
    slices: List[PercentileSlice] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Building blocks
# ---------------------------------------------------------------------------


def percentile_index(percent: float, n: int) -> int:
    """Map *percent* (0-100) to an index into a sorted sequence of length *n*.

    Rounds half up and clamps to ``[0, n - 1]``.
    """
    if n <= 0:
        raise ValueError("percentile_index needs a non-empty sequence")
    idx = math.floor(percent / 100.0 * (n - 1) + 0.5)
    return min(max(idx, 0), n - 1)


def percentile_window(
    ordered: Sequence[float], bounds: PercentileBounds
) -> Tuple[float, float]:
    """Return (lower, upper) taken from *ordered* at the window's indexes."""
    n = len(ordered)
    return (
        ordered[percentile_index(bounds.lower, n)],
        ordered[percentile_index(bounds.upper, n)],
    )


def median_of(ordered: Sequence[float]) -> float:
    """Median of an already sorted, non-empty sequence."""
    mid = len(ordered) // 2
    if len(ordered) % 2:
        return ordered[mid]
    return (ordered[mid - 1] + ordered[mid]) / 2.0


def population_stddev(values: Sequence[float], mean: float) -> Optional[float]:
    """Population standard deviation (divides by n); None below two samples.

    Deviations are scaled by the largest one before squaring so samples near
    the float limits do not overflow.
    """
    n = len(values)
    if n < 2:
        return None
    deviations = [value - mean for value in values]
    scale = max(abs(d) for d in deviations)
    if scale == 0.0 or not math.isfinite(scale):
        return scale
    squared = math.fsum((d / scale) * (d / scale) for d in deviations)
    return math.sqrt(squared / n) * scale


def _scan(values: Sequence[float]) -> Tuple[float, float, float]:
    """Single pass over *values*: return (min, max, sum) in input order."""
    lower = upper = values[0]
    total = 0.0
    for value in values:
        if value < lower:
            lower = value
        if value > upper:
            upper = value
        total += value
    return lower, upper, total


def _summarize(
    values: Sequence[float],
    bounds: PercentileBounds,
    ordered: Optional[Sequence[float]] = None,
) -> Summary:
    if not values:
        return Summary.empty()

    count = len(values)
    lower, upper, total = _scan(values)
    mean = total / count
    # The median needs ordered data on both paths; the full range only
    # skips the percentile lookup.
    if ordered is None:
        ordered = sorted(values)
    if not bounds.is_full_range:
        lower, upper = percentile_window(ordered, bounds)

    return Summary(
        count=count,
        sum=total,
        mean=mean,
        upper=upper,
        lower=lower,
        median=median_of(ordered),
        stddev=population_stddev(values, mean),
    )


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------


def compute_summary(
    samples: Iterable[float], bounds: Optional[PercentileBounds] = None
) -> Summary:
    """Consume *samples* and return their Summary.

    With full-range bounds (the default) min/max come from the same linear
    pass that accumulates the sum; otherwise they are read from the sorted
    samples at the window's percentile indexes. Median and stddev always
    cover every sample.
    """
    if bounds is None:
        bounds = PercentileBounds()
    return _summarize(list(samples), bounds)


def compute_report(
    samples: Iterable[float],
    bounds: Optional[PercentileBounds] = None,
    slice_percents: Sequence[int] = (),
) -> Report:
    """Summary of *samples* plus one PercentileSlice per entry in *slice_percents*.

    A slice for ``p`` covers the lowest ``p * n // 100`` sorted samples and
    is summarized over its full range. Percents must already be validated
    integers in 1..99.
    """
    if bounds is None:
        bounds = PercentileBounds()
    values = list(samples)
    ordered = sorted(values)
    summary = _summarize(values, bounds, ordered)

    full = PercentileBounds.full()
    slices = []
    for percent in slice_percents:
        head = ordered[: percent * len(ordered) // 100]
        slices.append(PercentileSlice(percent, _summarize(head, full, head)))
    return Report(summary=summary, slices=slices)
