"""Loading numeric columns from text input.

Lines are split on any of the delimiter characters the way strtok(3)
does it: runs of delimiters count as one and empty tokens are dropped.
Lines without the requested column are skipped. A field that is not a
plain ASCII decimal number, or a line that is not valid UTF-8, is an
error. Non-finite values are discarded.
"""

from __future__ import annotations

import logging
import math
import re
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, TextIO

import numpy as np

from ministat.core.errors import InvalidDataError

logger = logging.getLogger(__name__)

STDIN_NAME = "stdin"

NUMBER_PATTERN = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?|inf(?:inity)?|nan)",
    re.ASCII | re.IGNORECASE,
)


@dataclass(frozen=True)
class Dataset:
    """One input's values, sorted ascending.

    Attributes:
        path: Display label (file path or "stdin")
        data: Finite values as a float64 array
    """

    path: str
    data: np.ndarray

    def __len__(self) -> int:
        return len(self.data)


def _splitter(delimiter: str) -> re.Pattern[str]:
    return re.compile(f"[{re.escape(delimiter)}]+")


def parse_lines(
    lines: Iterable[str | bytes],
    name: str,
    column: int = 1,
    delimiter: str = " \t",
) -> Dataset:
    """Build a dataset from the ``column``-th field of each line.

    Args:
        lines: Input lines (trailing newlines are ignored); bytes lines
            are decoded as UTF-8
        name: Label used in error messages and the plot legend
        column: 1-based column to read
        delimiter: Characters that separate columns

    Returns:
        Dataset with sorted finite values

    Raises:
        InvalidDataError: If a line is not UTF-8 or a selected field is
            not a number
    """
    split = _splitter(delimiter)
    values: list[float] = []
    for line_no, line in enumerate(lines, start=1):
        if isinstance(line, bytes):
            try:
                line = line.decode("utf-8")
            except UnicodeDecodeError:
                raise InvalidDataError(line_no, name) from None
        tokens = [t for t in split.split(line.rstrip("\r\n")) if t]
        if len(tokens) < column:
            continue
        token = tokens[column - 1]
        if not NUMBER_PATTERN.fullmatch(token):
            raise InvalidDataError(line_no, name)
        value = float(token)
        if math.isfinite(value):
            values.append(value)

    data = np.sort(np.asarray(values, dtype=np.float64))
    logger.debug(f"Read {len(data)} values from {name}")
    return Dataset(path=name, data=data)


def load_dataset(
    stream: TextIO | BinaryIO, name: str, column: int = 1, delimiter: str = " \t"
) -> Dataset:
    """Read a dataset from an open text or binary stream."""
    return parse_lines(stream, name, column=column, delimiter=delimiter)


def load_datasets(
    files: Sequence[str | Path],
    column: int = 1,
    delimiter: str = " \t",
    stdin: TextIO | None = None,
) -> list[Dataset]:
    """Load one dataset per file, in argument order.

    With no files, standard input is read as a single dataset named
    ``stdin``.
    """
    if not files:
        stream = stdin if stdin is not None else sys.stdin
        # Read raw bytes when available so decode errors carry a line number
        stream = getattr(stream, "buffer", stream)
        return [load_dataset(stream, STDIN_NAME, column, delimiter)]

    datasets = []
    for fname in files:
        logger.debug(f"Loading {fname}")
        with open(fname, "rb") as f:
            datasets.append(load_dataset(f, str(fname), column, delimiter))
    return datasets
