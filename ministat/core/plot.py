"""Text rendering of several distributions on a shared axis.

Each dataset gets a glyph; every value is binned into one of ``width - 2``
character columns between the borders. Below the points, a bar shows the
mean (``A``), the median (``M``) and the one standard deviation range of
each dataset.

Example:
    >>> from ministat.core.stats import compute_stats
    >>> data = [[1.0, 2.0, 4.0, 8.0, 16.0], [5.0, 6.0, 7.0, 8.0, 9.0]]
    >>> stats = [compute_stats(d) for d in data]
    >>> for line in render(30, data, stats, CLASSIC_SYMBOLS, PlotMode()):
    ...     print(line)
    +----------------------------+
    |  xx   x+ + +* +           x|
    ||______M_|A_M_|______|      |
    +----------------------------+
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TextIO

from ministat.core.errors import NoPlotPossibleError
from ministat.core.stats import Stats

__all__ = [
    "CLASSIC_CHARS",
    "CLASSIC_SYMBOLS",
    "MODERN_CHARS",
    "UNICODE_SYMBOLS",
    "DrawingChars",
    "Plot",
    "PlotMode",
    "plot_graph",
    "render",
]

# Index 0 is the empty cell; indices 1..7 belong to datasets in input order.
CLASSIC_SYMBOLS: tuple[str, ...] = (" ", "x", "+", "*", "%", "#", "@", "O")
UNICODE_SYMBOLS: tuple[str, ...] = (" ", "●", "○", "◾", "◽", "◆", "◇", "▲")

# Shown for an overlap code the glyph set has no entry for.
UNKNOWN_GLYPH = "?"


@dataclass(frozen=True)
class DrawingChars:
    """Characters for the plot frame and the statistics bar."""

    ul: str
    ur: str
    horiz: str
    vert: str
    ll: str
    lr: str
    bar_start: str
    bar_end: str
    bar: str


CLASSIC_CHARS = DrawingChars(
    ul="+",
    ur="+",
    horiz="-",
    vert="|",
    ll="+",
    lr="+",
    bar_start="|",
    bar_end="|",
    bar="_",
)

MODERN_CHARS = DrawingChars(
    ul="┌",
    ur="┐",
    horiz="─",
    vert="│",
    ll="└",
    lr="┘",
    bar_start="├",
    bar_end="┤",
    bar="─",
)


@dataclass(frozen=True)
class PlotMode:
    """Display switches for a render.

    Attributes:
        stack: Stack every point in its column instead of merging runs
        separate_lines: One statistics bar per dataset instead of a shared one
        modern_chars: Unicode box drawing instead of ASCII
    """

    stack: bool = False
    separate_lines: bool = False
    modern_chars: bool = False

    @property
    def drawing_chars(self) -> DrawingChars:
        return MODERN_CHARS if self.modern_chars else CLASSIC_CHARS


class Plot:
    """A fixed-width axis spanning every dataset and its +/- 1 stddev range.

    The axis is sized so the first column is centered on the minimum and
    the last on the maximum, and the deviation bars are never clipped.
    """

    def __init__(self, width: int, min_value: float, max_value: float) -> None:
        if width < 3:
            raise NoPlotPossibleError()
        self.width = width
        self.min = min_value
        self.max = max_value
        self.col_count = width - 2
        if self.col_count > 1:
            self.dx = (max_value - min_value) / (self.col_count - 1)
        else:
            self.dx = 0.0
        self.zero_point = min_value - 0.5 * self.dx

    @classmethod
    def from_stats(cls, width: int, stats: Sequence[Stats]) -> Plot:
        """Size a plot to fit every dataset's extremes and deviation bars.

        Raises:
            NoPlotPossibleError: If there are no stats or the range is not finite
        """
        if not stats:
            raise NoPlotPossibleError()
        max_value = max(
            max(s.max for s in stats), max(s.mean + s.stddev for s in stats)
        )
        min_value = min(
            min(s.min for s in stats), min(s.mean - s.stddev for s in stats)
        )
        if not (math.isfinite(max_value) and math.isfinite(min_value)):
            raise NoPlotPossibleError()
        return cls(width, min_value, max_value)

    def discretize(self, value: float) -> int:
        """Column index for ``value``, clamped to the plot."""
        if self.dx <= 0:
            return 0
        col = math.floor((value - self.zero_point) / self.dx)
        return min(max(col, 0), self.col_count - 1)

    def build_columns(
        self, data: Sequence[Sequence[float]], stack: bool = False
    ) -> list[list[int]]:
        """Bin every dataset's points into per-column glyph codes.

        Each column lists codes from the bottom row up. A code is the
        1-based dataset index; when datasets share a cell in overlap mode
        their indices are OR-ed together.
        """
        columns: list[list[int]] = [[] for _ in range(self.col_count)]
        for idx, dataset in enumerate(data, start=1):
            height = 0
            last_seen: int | None = None
            for value in dataset:
                x = self.discretize(value)
                if stack:
                    columns[x].append(idx)
                    continue
                if x == last_seen:
                    height += 1
                else:
                    height = 1
                    last_seen = x
                if len(columns[x]) < height:
                    columns[x].append(idx)
                else:
                    columns[x][height - 1] |= idx
        return columns

    def draw_bar(self, bar: list[str], stat: Stats, chars: DrawingChars) -> None:
        """Draw one dataset's deviation range, mean and median onto ``bar``."""
        std_low = self.discretize(stat.mean - stat.stddev)
        std_high = self.discretize(stat.mean + stat.stddev)
        bar[std_low] = chars.bar_start
        bar[std_high] = chars.bar_end
        for i in range(std_low + 1, std_high):
            if bar[i] == " ":
                bar[i] = chars.bar
        bar[self.discretize(stat.mean)] = "A"
        bar[self.discretize(stat.median)] = "M"

    def draw(
        self,
        data: Sequence[Sequence[float]],
        stats: Sequence[Stats],
        symbols: Sequence[str],
        mode: PlotMode,
    ) -> list[str]:
        """Render the plot as a list of text rows, top border first."""
        chars = mode.drawing_chars
        columns = self.build_columns(data, stack=mode.stack)
        max_height = max(len(col) for col in columns)

        def framed(cells: Iterable[str]) -> str:
            return f"{chars.vert}{''.join(cells)}{chars.vert}"

        rows = [f"{chars.ul}{chars.horiz * self.col_count}{chars.ur}"]
        for row in range(max_height - 1, -1, -1):
            rows.append(
                framed(
                    _glyph(symbols, col[row]) if len(col) > row else " "
                    for col in columns
                )
            )

        if mode.separate_lines:
            for stat in stats:
                bar = [" "] * self.col_count
                self.draw_bar(bar, stat, chars)
                rows.append(framed(bar))
        else:
            bar = [" "] * self.col_count
            for stat in stats:
                self.draw_bar(bar, stat, chars)
            rows.append(framed(bar))

        rows.append(f"{chars.ll}{chars.horiz * self.col_count}{chars.lr}")
        return rows


def _glyph(symbols: Sequence[str], code: int) -> str:
    if code < len(symbols):
        return symbols[code]
    return UNKNOWN_GLYPH


def render(
    width: int,
    data: Sequence[Sequence[float]],
    stats: Sequence[Stats],
    symbols: Sequence[str],
    mode: PlotMode,
) -> list[str]:
    """Render datasets side by side.

    Args:
        width: Total width in characters, borders included (at least 3)
        data: Sorted samples in input order
        stats: Stats for each sample, same order
        symbols: Glyph set; index 0 is the empty cell
        mode: Display switches

    Returns:
        Text rows of the plot

    Raises:
        NoPlotPossibleError: If there is nothing to plot or width < 3
    """
    plot = Plot.from_stats(width, stats)
    return plot.draw(data, stats, symbols, mode)


def plot_graph(
    f: TextIO,
    width: int,
    data: Sequence[Sequence[float]],
    stats: Sequence[Stats],
    symbols: Sequence[str],
    mode: PlotMode,
) -> None:
    """Render and write the plot to a text stream."""
    for line in render(width, data, stats, symbols, mode):
        f.write(line + "\n")
