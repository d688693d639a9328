"""Tests for vesting milestone dates"""

import pytest
from datetime import date, datetime, timezone

from ico_app.errors import TemporalDataError
from ico_app.vesting.dates import (
    add_months,
    cliff_date,
    safe_vesting_date_list,
    vesting_date_list,
    vesting_end_date,
)


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


class TestAddMonths:
    """Test calendar month arithmetic"""

    def test_keeps_day_of_month(self):
        """Should keep the day of month"""
        assert add_months(utc(2024, 1, 15), 3) == utc(2024, 4, 15)

    def test_clamps_to_month_end(self):
        """Should clamp to the last day of shorter months"""
        assert add_months(utc(2024, 1, 31), 1) == utc(2024, 2, 29)
        assert add_months(utc(2023, 1, 31), 1) == utc(2023, 2, 28)

    def test_truncates_fractional_months(self):
        """Should truncate fractional month counts toward zero"""
        assert add_months(utc(2024, 1, 15), 2.9) == utc(2024, 3, 15)
        assert add_months(utc(2024, 6, 15), -1.5) == utc(2024, 5, 15)

    def test_accepts_strings_and_dates(self):
        """Should accept ISO strings and plain dates"""
        assert add_months("2024-01-15T00:00:00Z", 1) == utc(2024, 2, 15)
        assert add_months(date(2024, 1, 15), 12) == utc(2025, 1, 15)

    def test_cliff_and_end_dates(self):
        """Should derive cliff and end dates from the start"""
        start = utc(2024, 1, 1)
        assert cliff_date(start, 6) == utc(2024, 7, 1)
        assert vesting_end_date(start, 24) == utc(2026, 1, 1)

    def test_non_finite_months_raise(self):
        """Should raise a temporal error for non-finite month counts"""
        with pytest.raises(TemporalDataError):
            add_months(utc(2024, 1, 1), float("inf"))


class TestVestingDateList:
    """Test vesting_date_list"""

    def test_no_cliff_length(self):
        """Should hold start plus the requested periods when there is no cliff"""
        start = utc(2024, 1, 15)
        dates = vesting_date_list(start, 0, 12, 4)

        assert len(dates) == 5
        assert dates == [
            start,
            utc(2024, 4, 15),
            utc(2024, 7, 15),
            utc(2024, 10, 15),
            utc(2025, 1, 15),
        ]

    def test_cliff_date_included(self):
        """Should insert the cliff end after the start when there is a cliff"""
        start = utc(2024, 1, 15)
        dates = vesting_date_list(start, 6, 24, 12)

        assert len(dates) == 14
        assert dates[0] == start
        assert dates[1] == utc(2024, 7, 15)
        # 1.5 months per period, truncated
        assert dates[2] == utc(2024, 8, 15)
        assert dates[3] == utc(2024, 10, 15)
        assert dates[-1] == utc(2026, 1, 15)

    def test_default_period_count(self):
        """Should generate twelve periods by default"""
        assert len(vesting_date_list(utc(2024, 1, 1), 0, 12)) == 13

    def test_duration_shorter_than_cliff(self):
        """Should step backwards from the cliff end instead of raising"""
        dates = vesting_date_list(utc(2024, 1, 15), 6, 3, 3)

        assert dates == [
            utc(2024, 1, 15),
            utc(2024, 7, 15),
            utc(2024, 6, 15),
            utc(2024, 5, 15),
            utc(2024, 4, 15),
        ]

    def test_epoch_milliseconds_start(self):
        """Should accept epoch milliseconds"""
        dates = vesting_date_list(1704067200000, 0, 2, 2)
        assert dates[0] == utc(2024, 1, 1)
        assert dates[-1] == utc(2024, 3, 1)

    def test_fresh_list_each_call(self):
        """Should not share the returned list between calls"""
        first = vesting_date_list(utc(2024, 1, 1), 0, 12, 4)
        second = vesting_date_list(utc(2024, 1, 1), 0, 12, 4)

        assert first == second
        assert first is not second
        first.append(utc(2030, 1, 1))
        assert len(second) == 5

    def test_unparseable_start_raises(self):
        """Should raise a temporal error for an unparseable start"""
        with pytest.raises(TemporalDataError):
            vesting_date_list("not a date", 0, 12, 4)


class TestSafeVestingDateList:
    """Test the display variant that never raises"""

    def test_unparseable_start_returns_empty(self):
        """Should degrade to an empty list"""
        assert safe_vesting_date_list("not a date", 0, 12, 4) == []

    def test_missing_start_returns_empty(self):
        """Should return an empty list for a missing start"""
        assert safe_vesting_date_list(None, 0, 12, 4) == []

    def test_valid_start_matches_core(self):
        """Should match the core function on valid input"""
        start = utc(2024, 1, 15)
        assert safe_vesting_date_list(start, 3, 15, 6) == vesting_date_list(start, 3, 15, 6)
