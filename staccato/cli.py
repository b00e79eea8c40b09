"""CLI entry point: reads numbers from a file or stdin, prints their statistics."""

import argparse
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import List, Optional

from .config import StaccatoConfig, load_config, parse_percent_list
from .errors import StaccatoError
from .report import format_report
from .source import is_interactive, open_input, read_values
from .stats import compute_report


def _version() -> str:
    try:
        return version("staccato")
    except PackageNotFoundError:  # pragma: no cover
        return "unknown"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="st",
        description=(
            "Compute statistics (count, sum, mean, upper, lower, median, "
            "stddev) for a stream of numbers, one per line."
        ),
    )
    parser.add_argument(
        "file",
        nargs="?",
        default=None,
        help="file to read values from; '-' or omitted reads stdin",
    )
    parser.add_argument(
        "-l",
        "--lower",
        type=float,
        metavar="PCT",
        help="percentile (0-100) reported as lower; default 0, the minimum",
    )
    parser.add_argument(
        "-u",
        "--upper",
        type=float,
        metavar="PCT",
        help="percentile (0-100) reported as upper; default 100, the maximum",
    )
    parser.add_argument(
        "-p",
        "--percentiles",
        metavar="LIST",
        help=(
            "comma separated percents (1-99); for each one also report the "
            "statistics of the lowest PCT%% of values"
        ),
    )
    parser.add_argument(
        "--precision",
        type=int,
        metavar="N",
        help="print floats with N decimal places",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_version()}")
    return parser


def _resolve_config(args: argparse.Namespace) -> StaccatoConfig:
    """Overlay command-line flags onto the file config and validate it."""
    config = load_config()
    if args.lower is not None:
        config.lower_percentile = args.lower
    if args.upper is not None:
        config.upper_percentile = args.upper
    if args.percentiles is not None:
        config.slice_percentiles = parse_percent_list(args.percentiles)
    if args.precision is not None:
        config.precision = args.precision
    config.validate()
    return config


def _run(args: argparse.Namespace) -> List[str]:
    config = _resolve_config(args)
    bounds = config.bounds()
    with open_input(args.file) as stream:
        if is_interactive(stream):
            print(
                "staccato: reading values from stdin, one per line "
                "(end with Ctrl-D)",
                file=sys.stderr,
            )
        report = compute_report(
            read_values(stream), bounds, config.slice_percentiles
        )
    return format_report(report, precision=config.precision)


def main(argv: Optional[List[str]] = None) -> None:
    args = _build_parser().parse_args(argv)
    try:
        lines = _run(args)
    except StaccatoError as exc:
        print(f"staccato: {exc}", file=sys.stderr)
        sys.exit(1)
    for line in lines:
        print(line)
