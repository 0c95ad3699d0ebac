"""Command-line interface for ministat."""

from __future__ import annotations

import argparse
import logging
import shutil
import sys

from pydantic import ValidationError

from ministat import __version__
from ministat.config import Settings, get_settings
from ministat.core.data import load_datasets
from ministat.core.errors import MinistatError
from ministat.core.options import ReportOptions
from ministat.report import check_dataset_count, run_report

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    """Create the argument parser, with defaults taken from settings."""
    parser = argparse.ArgumentParser(
        prog="ministat",
        description="Statistics and Welch's t-test comparison of datasets, "
        "with a text plot of their distributions",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-n",
        "--raw",
        dest="raw_stats",
        action="store_true",
        help="Just report the raw statistics of the input, suppress the "
        "plot and the relative comparisons",
    )
    parser.add_argument(
        "-s",
        "--separate",
        dest="separate_lines",
        action="store_true",
        help="Print the average/median/stddev bars on separate lines in the "
        "plot, to avoid overlap",
    )
    parser.add_argument(
        "-A",
        "--stats-only",
        dest="stats_only",
        action="store_true",
        help="Print statistics only. Suppress the graph",
    )
    parser.add_argument(
        "-m",
        "--modern",
        dest="modern_chars",
        action="store_true",
        default=settings.modern_chars,
        help="Use non-ASCII characters for drawing the graph",
    )
    parser.add_argument(
        "-t",
        "--stack",
        action="store_true",
        help="Stack datapoints in the graph instead of overlapping them",
    )
    parser.add_argument(
        "-C",
        "--column",
        default="1",
        help="Which column of data to use (default: 1)",
    )
    parser.add_argument(
        "-c",
        "--confidence",
        default=settings.confidence,
        help="Confidence level for Welch's t-test: 80, 90, 95, 98, 99 or 99.5 "
        f"(default: {settings.confidence})",
    )
    parser.add_argument(
        "-d",
        "--delimit",
        dest="delimiter",
        default=settings.delimiter,
        help="Column delimiter characters (default: space and tab)",
    )
    parser.add_argument(
        "-w",
        "--width",
        type=int,
        default=settings.width,
        help="Width of the plot in characters (default: terminal width, "
        f"or {settings.default_width})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug information to stderr",
    )
    parser.add_argument(
        "files",
        nargs="*",
        help="Files containing datapoints (default: standard input)",
    )
    return parser


def get_width(options: ReportOptions, settings: Settings) -> int:
    """Plot width: explicit option, else terminal width, else the fallback."""
    if options.width is not None:
        return options.width
    columns = shutil.get_terminal_size((settings.default_width, 24)).columns
    return columns if columns >= 3 else settings.default_width


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    settings = get_settings()
    parser = build_parser(settings)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        options = ReportOptions(
            raw_stats=args.raw_stats,
            separate_lines=args.separate_lines,
            stats_only=args.stats_only,
            modern_chars=args.modern_chars,
            stack=args.stack,
            column=args.column,
            confidence=args.confidence,
            delimiter=args.delimiter,
            width=args.width,
            files=args.files,
        )
    except ValidationError as e:
        for error in e.errors():
            message = error["msg"].removeprefix("Value error, ")
            print(f"ministat: {message}", file=sys.stderr)
        return EXIT_USAGE

    try:
        check_dataset_count(max(len(options.files), 1), options.symbols)
        datasets = load_datasets(
            options.files, column=options.column, delimiter=options.delimiter
        )
        run_report(options, datasets, sys.stdout, get_width(options, settings))
    except MinistatError as e:
        logger.debug(f"Report aborted: {e.kind.value}")
        print(f"ministat: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except OSError as e:
        print(f"ministat: {e}", file=sys.stderr)
        return EXIT_FAILURE

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
