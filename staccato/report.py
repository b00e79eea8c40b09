"""Render a Report as ``key: value`` lines."""

from typing import List, Optional, Union

from .stats import Report, Summary


def format_value(value: Union[int, float], precision: Optional[int] = None) -> str:
    if isinstance(value, int) or precision is None:
        return str(value)
    return f"{value:.{precision}f}"


def format_summary(
    summary: Summary, suffix: str = "", precision: Optional[int] = None
) -> List[str]:
    """Return one line per present field, in report order.

    Absent fields are left out, so an empty summary renders as ``count: 0``.
    A *suffix* is appended to every key (``count_90``).
    """
    lines = []
    for name, value in summary.items():
        if value is None:
            continue
        key = f"{name}_{suffix}" if suffix else name
        lines.append(f"{key}: {format_value(value, precision)}")
    return lines


def format_report(report: Report, precision: Optional[int] = None) -> List[str]:
    """Main summary lines followed by each slice, keys suffixed with its percent."""
    lines = format_summary(report.summary, precision=precision)
    for piece in report.slices:
        lines.extend(format_summary(piece.summary, str(piece.percent), precision))
    return lines
