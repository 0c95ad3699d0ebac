"""Core functionality for ministat.

This module contains:
- Summary statistics with compensated Welford accumulation
- Welch's t-test against a table of critical values
- Text rasterization of several distributions on one axis
- Input loading and validated report options
"""

from ministat.core.compare import Verdict, compare
from ministat.core.errors import ErrorKind, MinistatError
from ministat.core.plot import PlotMode, render
from ministat.core.stats import Stats, compute_stats
from ministat.core.t_table import CONFIDENCES, confidence_index

__all__ = [
    "CONFIDENCES",
    "ErrorKind",
    "MinistatError",
    "PlotMode",
    "Stats",
    "Verdict",
    "compare",
    "compute_stats",
    "confidence_index",
    "render",
]
