"""Validated options for one report run.

Example:
    >>> opts = ReportOptions(confidence="99", stack=True)
    >>> opts.confidence_index
    4
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ministat.core.errors import InvalidColumnError, InvalidConfidenceError
from ministat.core.plot import CLASSIC_SYMBOLS, UNICODE_SYMBOLS, PlotMode
from ministat.core.t_table import CONFIDENCES


class ReportOptions(BaseModel):
    """Everything that shapes a report, independent of where it came from.

    Attributes:
        raw_stats: Only report raw statistics, no plot and no comparisons
        separate_lines: One statistics bar per dataset in the plot
        stats_only: Statistics and comparisons without the plot
        modern_chars: Unicode glyphs and box drawing
        stack: Stack datapoints instead of overlapping them
        column: 1-based input column to read
        confidence: Confidence level label for the t-test
        delimiter: Column delimiter characters
        width: Plot width in characters (None = detect)
        files: Input files (empty = standard input)
    """

    model_config = ConfigDict(frozen=True)

    raw_stats: bool = False
    separate_lines: bool = False
    stats_only: bool = False
    modern_chars: bool = False
    stack: bool = False
    column: int = Field(default=1, description="1-based input column")
    confidence: str = Field(default="95", description="Confidence level")
    delimiter: str = Field(default=" \t", min_length=1)
    width: int | None = Field(default=None, ge=3)
    files: list[str] = Field(default_factory=list)

    @field_validator("column", mode="before")
    @classmethod
    def validate_column(cls, v: object) -> int:
        """Accept integers (or integer strings) of at least 1."""
        try:
            column = int(str(v).strip())
        except ValueError:
            raise ValueError(str(InvalidColumnError(str(v)))) from None
        if column < 1:
            raise ValueError(str(InvalidColumnError(str(v))))
        return column

    @field_validator("confidence", mode="before")
    @classmethod
    def validate_confidence(cls, v: object) -> str:
        """Accept only the tabulated confidence levels."""
        label = str(v).strip()
        if label not in CONFIDENCES:
            raise ValueError(str(InvalidConfidenceError(str(v))))
        return label

    @property
    def confidence_index(self) -> int:
        return CONFIDENCES.index(self.confidence)

    @property
    def plot_mode(self) -> PlotMode:
        return PlotMode(
            stack=self.stack,
            separate_lines=self.separate_lines,
            modern_chars=self.modern_chars,
        )

    @property
    def symbols(self) -> tuple[str, ...]:
        return UNICODE_SYMBOLS if self.modern_chars else CLASSIC_SYMBOLS
