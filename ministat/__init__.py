"""ministat: statistics and significance testing for columns of numbers.

Computes descriptive statistics for one or more datasets, tests whether
each differs from the first with Welch's t-test, and draws their
distributions side by side as text.
"""

__version__ = "0.1.0"


def __getattr__(name: str):
    """Lazy imports for main package exports."""
    if name in ("Stats", "compute_stats"):
        from ministat.core import stats

        return getattr(stats, name)
    if name in ("Verdict", "compare"):
        from ministat.core import compare

        return getattr(compare, name)
    if name in ("PlotMode", "render"):
        from ministat.core import plot

        return getattr(plot, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "PlotMode",
    "Stats",
    "Verdict",
    "__version__",
    "compare",
    "compute_stats",
    "render",
]
