"""Pytest configuration and fixtures for ministat tests."""

import pytest

from ministat.core.stats import Stats, compute_stats


@pytest.fixture
def skewed_sample() -> list[float]:
    """Powers of two: mean 6.2, median 4."""
    return [1.0, 2.0, 4.0, 8.0, 16.0]


@pytest.fixture
def narrow_sample() -> list[float]:
    """Mean and median 7, overlapping the skewed sample."""
    return [5.0, 6.0, 7.0, 8.0, 9.0]


@pytest.fixture
def shifted_sample() -> list[float]:
    """Mean 17, clearly above the skewed sample."""
    return [15.0, 16.0, 17.0, 18.0, 19.0]


@pytest.fixture
def skewed_stats(skewed_sample: list[float]) -> Stats:
    return compute_stats(skewed_sample)


@pytest.fixture
def narrow_stats(narrow_sample: list[float]) -> Stats:
    return compute_stats(narrow_sample)


@pytest.fixture
def shifted_stats(shifted_sample: list[float]) -> Stats:
    return compute_stats(shifted_sample)
