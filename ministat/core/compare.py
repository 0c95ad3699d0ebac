"""Welch's t-test between two summarized samples.

Welch's test does not assume equal variances or equal sample sizes, which
suits benchmark runs of differing length and noise. The degrees of freedom
come from the Welch-Satterthwaite approximation and select a row of the
critical value table.

Example:
    >>> from ministat.core.stats import compute_stats
    >>> base = compute_stats([1, 2, 4, 8, 16])
    >>> other = compute_stats([15, 16, 17, 18, 19])
    >>> verdict = compare(other, base, confidence_index("95"))
    >>> verdict.is_different
    True
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from ministat.core.errors import InsufficientDegreesOfFreedomError
from ministat.core.stats import Stats
from ministat.core.t_table import CONFIDENCES, confidence_index, critical_value

__all__ = ["Verdict", "compare", "confidence_index", "welch_degrees_of_freedom"]


@dataclass(frozen=True)
class Verdict:
    """Outcome of comparing a dataset against a reference.

    ``Same`` means no difference could be shown at the requested
    confidence, not that the means are equal. The numeric fields are only
    set when the difference is significant.

    Attributes:
        confidence: Confidence label used (e.g. "95")
        t_statistic: Welch's t (always non-negative)
        degrees_of_freedom: Welch-Satterthwaite degrees of freedom
        t_required: Critical value the statistic was tested against
        delta: Difference of means (dataset minus reference)
        margin: Half-width of the confidence interval on ``delta``
        percent_delta: ``delta`` as a percentage of the reference mean
        percent_margin: ``margin`` as a percentage of the reference mean
    """

    confidence: str
    t_statistic: float
    degrees_of_freedom: float
    t_required: float
    delta: float | None = None
    margin: float | None = None
    percent_delta: float | None = None
    percent_margin: float | None = None

    @property
    def is_different(self) -> bool:
        return self.delta is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "verdict": "different" if self.is_different else "same",
            "confidence": self.confidence,
            "t_statistic": self.t_statistic,
            "degrees_of_freedom": self.degrees_of_freedom,
            "t_required": self.t_required,
            "delta": self.delta,
            "margin": self.margin,
            "percent_delta": self.percent_delta,
            "percent_margin": self.percent_margin,
        }


def _percent_of(value: float, reference: float) -> float:
    if reference == 0:
        return math.nan
    return value * 100.0 / reference


def welch_degrees_of_freedom(a: Stats, b: Stats) -> float:
    """Welch-Satterthwaite approximation of the degrees of freedom."""
    pooled = a.var / a.n + b.var / b.n
    denominator = a.var**2 / (a.n * a.n * (a.n - 1)) + b.var**2 / (
        b.n * b.n * (b.n - 1)
    )
    if denominator == 0:
        raise InsufficientDegreesOfFreedomError(0.0)
    return pooled**2 / denominator


def compare(a: Stats, b: Stats, conf_index: int) -> Verdict:
    """Test whether the mean of ``a`` differs from the mean of ``b``.

    ``b`` is the reference: percentages are relative to its mean. Swapping
    the arguments negates ``delta`` but leaves the statistic and the
    verdict unchanged.

    Args:
        a: Dataset under comparison
        b: Reference dataset
        conf_index: Column index into the critical value table

    Returns:
        Verdict with the test outcome

    Raises:
        InsufficientDegreesOfFreedomError: If both samples have zero
            variance or the degrees of freedom fall below 1
    """
    pooled = a.var / a.n + b.var / b.n
    if pooled <= 0:
        raise InsufficientDegreesOfFreedomError(0.0)

    std_error = math.sqrt(pooled)
    t = abs(a.mean - b.mean) / std_error
    df = welch_degrees_of_freedom(a, b)
    t_required = critical_value(df, conf_index)
    label = CONFIDENCES[conf_index]

    if t <= t_required:
        return Verdict(
            confidence=label,
            t_statistic=t,
            degrees_of_freedom=df,
            t_required=t_required,
        )

    delta = a.mean - b.mean
    margin = t_required * std_error
    return Verdict(
        confidence=label,
        t_statistic=t,
        degrees_of_freedom=df,
        t_required=t_required,
        delta=delta,
        margin=margin,
        percent_delta=_percent_of(delta, b.mean),
        percent_margin=_percent_of(margin, b.mean),
    )
