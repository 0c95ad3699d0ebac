"""Error types for ministat.

Every failure the tool can report belongs to exactly one ``ErrorKind``.
Each kind has its own exception class so callers can catch precisely what
they expect, while the CLI catches the common ``MinistatError`` base.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Kinds of failure surfaced to the user."""

    INVALID_DATA = "invalid_data"
    INVALID_COLUMN = "invalid_column"
    INVALID_CONFIDENCE = "invalid_confidence"
    INSUFFICIENT_DATA = "insufficient_data"
    DEGENERATE_SAMPLE = "degenerate_sample"
    INSUFFICIENT_DEGREES_OF_FREEDOM = "insufficient_degrees_of_freedom"
    NO_PLOT_POSSIBLE = "no_plot_possible"
    TOO_MANY_DATASETS = "too_many_datasets"


class MinistatError(Exception):
    """Base class for all report-aborting errors."""

    kind: ErrorKind


class InvalidDataError(MinistatError):
    """A selected column held text that is not a number."""

    kind = ErrorKind.INVALID_DATA

    def __init__(self, line_no: int, file: str) -> None:
        self.line_no = line_no
        self.file = file
        super().__init__(f"Invalid data on line {line_no} of {file}")


class InvalidColumnError(MinistatError):
    kind = ErrorKind.INVALID_COLUMN

    def __init__(self, provided_column: str) -> None:
        self.provided_column = provided_column
        super().__init__(
            f"'{provided_column}' is not a valid column (must be at least 1)"
        )


class InvalidConfidenceError(MinistatError):
    kind = ErrorKind.INVALID_CONFIDENCE

    def __init__(self, provided_confidence: str) -> None:
        self.provided_confidence = provided_confidence
        super().__init__(
            f"'{provided_confidence}' is not a valid confidence "
            "(must be one of 80, 90, 95, 98, 99 and 99.5)"
        )


class InsufficientDataError(MinistatError):
    kind = ErrorKind.INSUFFICIENT_DATA

    def __init__(self, file: str) -> None:
        self.file = file
        super().__init__(
            f"Dataset {file} must contain at least 3 datapoints. "
            "(Perhaps there was not enough data in the column you selected?)"
        )


class DegenerateSampleError(MinistatError):
    """Sample too small to have a variance."""

    kind = ErrorKind.DEGENERATE_SAMPLE

    def __init__(self, size: int) -> None:
        self.size = size
        super().__init__(
            f"Sample of {size} value(s) is too small (need at least 2)"
        )


class InsufficientDegreesOfFreedomError(MinistatError):
    """Welch-Satterthwaite degrees of freedom fall outside the table."""

    kind = ErrorKind.INSUFFICIENT_DEGREES_OF_FREEDOM

    def __init__(self, degrees_of_freedom: float) -> None:
        self.degrees_of_freedom = degrees_of_freedom
        super().__init__(
            f"Cannot compare datasets: {degrees_of_freedom} degrees of freedom "
            "(need at least 1)"
        )


class NoPlotPossibleError(MinistatError):
    kind = ErrorKind.NO_PLOT_POSSIBLE

    def __init__(self) -> None:
        super().__init__("Unable to create a plot for this data")


class TooManyDatasetsError(MinistatError):
    kind = ErrorKind.TOO_MANY_DATASETS

    def __init__(self, dataset_count: int, limit: int = 7) -> None:
        self.dataset_count = dataset_count
        self.limit = limit
        super().__init__(
            f"Too many datasets. You may have at most {limit}; "
            f"you had {dataset_count}"
        )
