"""Two-sided critical values of Student's t distribution.

The table has one row per whole degree of freedom from 1 to 1000 and a
final row holding the asymptotic (normal) values used for anything larger.
Columns follow ``CONFIDENCES``. It is generated once at import and is
read-only afterwards.
"""

from __future__ import annotations

import math

import numpy as np
from scipy import stats

from ministat.core.errors import (
    InsufficientDegreesOfFreedomError,
    InvalidConfidenceError,
)

CONFIDENCES: tuple[str, ...] = ("80", "90", "95", "98", "99", "99.5")

MAX_DEGREES_OF_FREEDOM = 1000


def _build_table() -> np.ndarray:
    levels = np.array([float(c) / 100.0 for c in CONFIDENCES])
    quantiles = 1.0 - (1.0 - levels) / 2.0
    dfs = np.arange(1, MAX_DEGREES_OF_FREEDOM + 1, dtype=np.float64)

    finite = stats.t.ppf(quantiles[np.newaxis, :], dfs[:, np.newaxis])
    asymptotic = stats.norm.ppf(quantiles)[np.newaxis, :]

    table = np.vstack([finite, asymptotic])
    table.flags.writeable = False
    return table


T_TABLE: np.ndarray = _build_table()


def confidence_index(label: str) -> int:
    """Map a confidence label such as ``"95"`` to its table column.

    Raises:
        InvalidConfidenceError: If the label is not one of ``CONFIDENCES``
    """
    try:
        return CONFIDENCES.index(label.strip())
    except ValueError:
        raise InvalidConfidenceError(label) from None


def critical_value(degrees_of_freedom: float, conf_index: int) -> float:
    """Look up the critical t value for the given degrees of freedom.

    Degrees of freedom are truncated, not rounded. Anything above 1000 uses
    the asymptotic row.

    Raises:
        InsufficientDegreesOfFreedomError: If fewer than 1 degree of freedom
    """
    if math.isnan(degrees_of_freedom) or degrees_of_freedom < 1:
        raise InsufficientDegreesOfFreedomError(degrees_of_freedom)
    if degrees_of_freedom >= MAX_DEGREES_OF_FREEDOM + 1:
        row = MAX_DEGREES_OF_FREEDOM
    else:
        row = int(degrees_of_freedom) - 1
    return float(T_TABLE[row, conf_index])
