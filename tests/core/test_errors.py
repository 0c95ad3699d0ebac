"""Tests for the error taxonomy."""

import pytest

from ministat.core.errors import (
    DegenerateSampleError,
    ErrorKind,
    InsufficientDataError,
    InsufficientDegreesOfFreedomError,
    InvalidColumnError,
    InvalidConfidenceError,
    InvalidDataError,
    MinistatError,
    NoPlotPossibleError,
    TooManyDatasetsError,
)


class TestErrorKinds:
    """Each kind has exactly one exception class."""

    @pytest.mark.parametrize(
        "error,kind",
        [
            (InvalidDataError(4, "f.txt"), ErrorKind.INVALID_DATA),
            (InvalidColumnError("0"), ErrorKind.INVALID_COLUMN),
            (InvalidConfidenceError("42"), ErrorKind.INVALID_CONFIDENCE),
            (InsufficientDataError("f.txt"), ErrorKind.INSUFFICIENT_DATA),
            (DegenerateSampleError(1), ErrorKind.DEGENERATE_SAMPLE),
            (
                InsufficientDegreesOfFreedomError(0.5),
                ErrorKind.INSUFFICIENT_DEGREES_OF_FREEDOM,
            ),
            (NoPlotPossibleError(), ErrorKind.NO_PLOT_POSSIBLE),
            (TooManyDatasetsError(9), ErrorKind.TOO_MANY_DATASETS),
        ],
    )
    def test_kind(self, error: MinistatError, kind: ErrorKind) -> None:
        assert isinstance(error, MinistatError)
        assert error.kind == kind

    def test_kinds_are_unique(self) -> None:
        classes = MinistatError.__subclasses__()
        assert len({cls.kind for cls in classes}) == len(classes) == len(ErrorKind)


class TestMessages:
    """Messages shown to the user."""

    def test_invalid_data(self) -> None:
        assert str(InvalidDataError(4, "f.txt")) == "Invalid data on line 4 of f.txt"

    def test_invalid_column(self) -> None:
        assert str(InvalidColumnError("0")) == (
            "'0' is not a valid column (must be at least 1)"
        )

    def test_invalid_confidence(self) -> None:
        assert str(InvalidConfidenceError("42")) == (
            "'42' is not a valid confidence "
            "(must be one of 80, 90, 95, 98, 99 and 99.5)"
        )

    def test_insufficient_data(self) -> None:
        assert str(InsufficientDataError("f.txt")).startswith(
            "Dataset f.txt must contain at least 3 datapoints."
        )

    def test_too_many_datasets(self) -> None:
        assert str(TooManyDatasetsError(9)) == (
            "Too many datasets. You may have at most 7; you had 9"
        )

    def test_no_plot(self) -> None:
        assert str(NoPlotPossibleError()) == "Unable to create a plot for this data"
