"""Descriptive statistics for a single sample.

Mean and variance are computed in one pass with Welford's update, and the
running accumulators use Kahan compensated summation so long samples with
a wide spread of magnitudes do not drift.

Example:
    >>> stats = compute_stats([1.0, 2.0, 4.0, 8.0, 16.0])
    >>> round(stats.mean, 6), stats.median
    (6.2, 4.0)
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from ministat.core.errors import DegenerateSampleError


class KahanSum:
    """Compensated running sum."""

    __slots__ = ("_sum", "_compensation")

    def __init__(self, value: float = 0.0) -> None:
        self._sum = float(value)
        self._compensation = 0.0

    def add(self, value: float) -> None:
        y = value - self._compensation
        t = self._sum + y
        self._compensation = (t - self._sum) - y
        self._sum = t

    def __iadd__(self, value: float) -> KahanSum:
        self.add(value)
        return self

    @property
    def value(self) -> float:
        return self._sum


@dataclass(frozen=True)
class Stats:
    """Summary statistics for one sample.

    Attributes:
        n: Number of values
        min: Smallest value
        max: Largest value
        mean: Arithmetic mean
        var: Sample variance (divisor n - 1)
        stddev: Square root of ``var``
        median: Middle value of the sorted sample
    """

    n: int
    min: float
    max: float
    mean: float
    var: float
    stddev: float
    median: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "n": self.n,
            "min": self.min,
            "max": self.max,
            "mean": self.mean,
            "var": self.var,
            "stddev": self.stddev,
            "median": self.median,
        }


def compute_stats(sample: Sequence[float]) -> Stats:
    """Compute summary statistics for a sample.

    The median assumes ``sample`` is sorted ascending; sorting is the
    caller's job. Mean, variance and the extremes do not depend on order.

    Args:
        sample: At least two finite values

    Returns:
        Stats for the sample

    Raises:
        DegenerateSampleError: If the sample has fewer than two values
    """
    n = len(sample)
    if n < 2:
        raise DegenerateSampleError(n)

    lo = hi = float(sample[0])
    mean = KahanSum()
    squares = KahanSum()
    for k, value in enumerate(sample, start=1):
        x = float(value)
        if x < lo:
            lo = x
        if x > hi:
            hi = x
        old_mean = mean.value
        mean += (x - old_mean) / k
        squares += (x - old_mean) * (x - mean.value)

    var = max(squares.value, 0.0) / (n - 1)
    mid = n // 2
    if n % 2 == 1:
        median = float(sample[mid])
    else:
        median = (float(sample[mid - 1]) + float(sample[mid])) / 2.0

    return Stats(
        n=n,
        min=lo,
        max=hi,
        mean=mean.value,
        var=var,
        stddev=math.sqrt(var),
        median=median,
    )
