"""Tests for the functional API: options, display, dict and DataFrame export.

Run with: pytest tests/test_api.py -v
"""

import pandas as pd
import pytest

from periodalgebra import (
    InvalidArgumentError,
    Period,
    PeriodCollection,
    PeriodOptions,
    collection_from_records,
    collection_to_frame,
    create_collection,
    create_period,
    format_collection_display,
    format_period_display,
    period_to_dict,
)
from periodalgebra.collection import FRAME_COLUMNS
from periodalgebra.period import resolve_options


# ============================================================================
# Options Tests
# ============================================================================

class TestResolveOptions:
    """Test turning options arguments into PeriodOptions"""

    def test_none(self):
        """None gives the defaults"""
        assert resolve_options(None) == PeriodOptions()

    def test_passthrough(self):
        """PeriodOptions pass through unchanged"""
        options = PeriodOptions("hour", "end")
        assert resolve_options(options) is options

    def test_mapping(self):
        """Mappings are normalized"""
        assert resolve_options({"granularity": "Hour"}) == PeriodOptions("hour", "none")

    def test_unknown_key(self):
        """Unknown keys are rejected"""
        with pytest.raises(InvalidArgumentError, match="Unknown period options: grain"):
            resolve_options({"grain": "day"})

    def test_invalid_value(self):
        """Invalid values are rejected"""
        with pytest.raises(InvalidArgumentError):
            resolve_options({"exclude_boundaries": "middle"})


class TestCreatePeriod:
    """Test the functional constructor"""

    def test_create_period_defaults(self):
        """No options gives a day period including both ends"""
        p = create_period("2022-01-01", "2022-01-10")
        assert p == Period("2022-01-01", "2022-01-10")
        assert p.exclude_boundaries == "none"

    def test_create_period_with_options(self):
        """Options mapping sets granularity and boundaries"""
        p = create_period(
            "2022-01-01",
            "2022-01-02",
            {"granularity": "hour", "exclude_boundaries": "end"},
        )
        assert p.granularity == "hour"
        assert p.count() == 24

    def test_create_collection(self):
        """create_collection accepts any iterable"""
        periods = (Period("2022-01-0%d" % day, "2022-01-0%d" % day) for day in (1, 3, 5))
        c = create_collection(periods)
        assert isinstance(c, PeriodCollection)
        assert len(c) == 3


# ============================================================================
# Display Tests
# ============================================================================

class TestDisplay:
    """Test interval notation"""

    def test_closed(self):
        """Included endpoints use square brackets"""
        assert format_period_display(Period("2022-01-01", "2022-01-10")) == "[2022-01-01, 2022-01-10]"

    def test_half_open(self):
        """An excluded end uses a parenthesis"""
        p = Period("2022-01-01", "2022-01-10", exclude_boundaries="end")
        assert format_period_display(p) == "[2022-01-01, 2022-01-10)"

    def test_month(self):
        """Month periods show year and month"""
        p = Period("2022-01-01", "2022-03-01", granularity="month")
        assert format_period_display(p) == "[2022-01, 2022-03]"

    def test_hour_excluded_start(self):
        """Hour periods show the hour"""
        p = Period("2022-01-01", "2022-01-02", granularity="hour", exclude_boundaries="start")
        assert format_period_display(p) == "(2022-01-01 00:00, 2022-01-02 00:00]"

    def test_none(self):
        """None displays as empty string"""
        assert format_period_display(None) == ""

    def test_collection_display(self, sample_collection):
        """Collections join their periods"""
        assert format_collection_display(sample_collection) == (
            "[2022-01-01, 2022-01-05], [2022-01-10, 2022-01-15]"
        )

    def test_collection_display_empty(self):
        """Empty and None collections display as empty string"""
        assert format_collection_display(PeriodCollection()) == ""
        assert format_collection_display(None) == ""


# ============================================================================
# Export Tests
# ============================================================================

class TestPeriodToDict:
    """Test plain dict export"""

    def test_period_to_dict(self, utc):
        """All derived values are exported"""
        p = Period("2022-01-01", "2022-01-10", exclude_boundaries="end")
        result = period_to_dict(p)
        assert result == {
            "start_ts": utc(2022, 1, 1),
            "end_ts": utc(2022, 1, 10),
            "included_start_ts": utc(2022, 1, 1),
            "included_end_ts": utc(2022, 1, 9),
            "granularity": "day",
            "exclude_boundaries": "end",
            "length": 8,
            "count": 9,
        }


class TestFrames:
    """Test pandas DataFrame import and export"""

    def test_collection_to_frame(self, sample_collection):
        """One row per period, in order"""
        df = collection_to_frame(sample_collection)
        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == FRAME_COLUMNS
        assert len(df) == 2
        assert df["count"].tolist() == [5, 6]
        assert df["granularity"].tolist() == ["day", "day"]
        assert df["start_ts"].iloc[1] == pd.Timestamp("2022-01-10", tz="UTC")

    def test_empty_frame(self):
        """An empty collection gives an empty frame with all columns"""
        df = collection_to_frame(PeriodCollection())
        assert len(df) == 0
        assert list(df.columns) == FRAME_COLUMNS

    def test_frame_round_trip(self):
        """A frame built from a collection loads back to the same periods"""
        c = PeriodCollection(
            Period("2022-01-01", "2022-01-05", exclude_boundaries="end"),
            Period("2022-01-01T06:00", "2022-01-01T12:00", granularity="hour"),
        )
        assert collection_from_records(collection_to_frame(c)) == c

    def test_from_records(self):
        """Records without settings take the defaults"""
        records = [
            {"start_ts": "2022-01-01", "end_ts": "2022-01-05"},
            {"start_ts": "2022-01-10", "end_ts": "2022-01-15", "exclude_boundaries": "both"},
        ]
        c = collection_from_records(records, {"exclude_boundaries": "end"})
        assert c[0].exclude_boundaries == "end"
        assert c[1].exclude_boundaries == "both"

    def test_from_frame_with_missing_settings(self):
        """Missing values in settings columns fall back to defaults"""
        df = pd.DataFrame({
            "start_ts": ["2022-01-01", "2022-01-01"],
            "end_ts": ["2022-03-01", "2022-01-02"],
            "granularity": ["month", None],
        })
        c = collection_from_records(df)
        assert c[0].granularity == "month"
        assert c[1].granularity == "day"

    def test_from_records_missing_end(self):
        """Records need both start_ts and end_ts"""
        with pytest.raises(InvalidArgumentError, match="Record 1 needs both"):
            collection_from_records([
                {"start_ts": "2022-01-01", "end_ts": "2022-01-05"},
                {"start_ts": "2022-01-10"},
            ])

    def test_from_records_bad_options(self):
        """Invalid default options are rejected"""
        with pytest.raises(InvalidArgumentError):
            collection_from_records([], {"granularity": "week"})
