"""Text report: legend, plot, statistics table and comparisons.

Every dataset after the first is compared against the first one, the
baseline, never against each other.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TextIO

from ministat.core.compare import Verdict, compare
from ministat.core.data import Dataset
from ministat.core.errors import InsufficientDataError, TooManyDatasetsError
from ministat.core.options import ReportOptions
from ministat.core.plot import plot_graph
from ministat.core.stats import Stats, compute_stats

MIN_DATAPOINTS = 3


def max_datasets(symbols: Sequence[str]) -> int:
    """How many datasets a glyph set can tell apart."""
    return len(symbols) - 1


def check_dataset_count(count: int, symbols: Sequence[str]) -> None:
    """Raise TooManyDatasetsError if the glyph set cannot cover ``count``."""
    limit = max_datasets(symbols)
    if count > limit:
        raise TooManyDatasetsError(count, limit)


def fmt_decimal(x: float) -> str:
    """Six decimals with trailing zeros and a trailing point removed."""
    text = f"{x:.6f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def print_heading(
    f: TextIO, datasets: Sequence[Dataset], symbols: Sequence[str]
) -> None:
    """Write the legend mapping each glyph to its dataset."""
    for symbol, dataset in zip(symbols[1:], datasets):
        f.write(f"{symbol} {dataset.path}\n")


def format_verdict(verdict: Verdict) -> list[str]:
    """Lines describing one comparison against the baseline."""
    if not verdict.is_different:
        return [f"No difference proven at {verdict.confidence}% confidence"]
    return [
        f"Difference at {verdict.confidence}% confidence",
        f"\t{verdict.delta:.6f} +/- {verdict.margin:.6f}",
        f"\t{verdict.percent_delta:.6f}% +/- {verdict.percent_margin:.6f}%",
        f"\t(Welch's t = {verdict.t_statistic:.6f})",
    ]


def print_stats(
    f: TextIO,
    stats: Sequence[Stats],
    conf_index: int,
    raw_stats: bool,
    symbols: Sequence[str],
) -> None:
    """Write the statistics table, with comparisons unless ``raw_stats``."""
    f.write(
        f"  {'N':>3} {'Min':>13} {'Max':>13} {'Median':>13} "
        f"{'Avg':>13} {'Stddev':>13}\n"
    )
    baseline: Stats | None = None
    for symbol, stat in zip(symbols[1:], stats):
        f.write(
            f"{symbol} {stat.n:>3} {fmt_decimal(stat.min):>13} "
            f"{fmt_decimal(stat.max):>13} {fmt_decimal(stat.median):>13} "
            f"{fmt_decimal(stat.mean):>13} {fmt_decimal(stat.stddev):>13}\n"
        )
        if raw_stats:
            continue
        if baseline is None:
            baseline = stat
            continue
        for line in format_verdict(compare(stat, baseline, conf_index)):
            f.write(line + "\n")


def run_report(
    options: ReportOptions,
    datasets: Sequence[Dataset],
    f: TextIO,
    width: int,
) -> list[Stats]:
    """Produce the full report for already loaded datasets.

    Returns:
        Stats for each dataset, in input order

    Raises:
        TooManyDatasetsError: If there are more datasets than glyphs
        InsufficientDataError: If a dataset has fewer than 3 values
    """
    symbols = options.symbols
    check_dataset_count(len(datasets), symbols)
    for dataset in datasets:
        if len(dataset) < MIN_DATAPOINTS:
            raise InsufficientDataError(dataset.path)

    print_heading(f, datasets, symbols)
    stats = [compute_stats(dataset.data) for dataset in datasets]

    if not options.raw_stats and not options.stats_only:
        plot_graph(
            f,
            width,
            [dataset.data for dataset in datasets],
            stats,
            symbols,
            options.plot_mode,
        )
    print_stats(f, stats, options.confidence_index, options.raw_stats, symbols)
    return stats

