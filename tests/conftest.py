"""Shared test fixtures and utilities for periodalgebra tests."""

from datetime import datetime, timezone

import pytest

from periodalgebra import Period, PeriodCollection


@pytest.fixture
def utc():
    """Fixture providing a builder for aware UTC datetimes.

    Returns the form every parsed naive date takes.

    Example:
        def test_start(utc):
            assert Period("2022-01-01", "2022-01-02").start == utc(2022, 1, 1)
    """
    def build(year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0) -> datetime:
        return datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)
    return build


@pytest.fixture
def dates_of():
    """Fixture collecting every granularity point of some periods.

    Points come back sorted with duplicates kept, so overlapping coverage
    shows up as repeated dates.
    """
    def collect(*periods):
        points = []
        for period in periods:
            points.extend(period)
        return sorted(points)
    return collect


@pytest.fixture
def overlapping_pair():
    """[2022-01-01, 2022-01-15] and [2022-01-10, 2022-01-20]."""
    return Period("2022-01-01", "2022-01-15"), Period("2022-01-10", "2022-01-20")


@pytest.fixture
def disjoint_pair():
    """[2022-01-01, 2022-01-10] and [2022-01-15, 2022-01-20]."""
    return Period("2022-01-01", "2022-01-10"), Period("2022-01-15", "2022-01-20")


@pytest.fixture
def touching_pair():
    """[2022-01-01, 2022-01-10] and [2022-01-10, 2022-01-20]."""
    return Period("2022-01-01", "2022-01-10"), Period("2022-01-10", "2022-01-20")


@pytest.fixture
def sample_collection():
    """Two disjoint periods with a gap between them."""
    return PeriodCollection(
        Period("2022-01-01", "2022-01-05"),
        Period("2022-01-10", "2022-01-15"),
    )
