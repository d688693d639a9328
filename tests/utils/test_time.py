"""
Tests for clock resolution and date display helpers.

Verifies that explicit times are authoritative, the wall clock is only
read as a fallback, and display helpers degrade instead of raising.
"""

import pytest
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

from ico_app.config.defaults import DisplayParams
from ico_app.errors import TemporalDataError
from ico_app.utils.time import (
    days_since,
    days_until,
    format_countdown,
    format_date,
    format_datetime,
    format_relative_time,
    is_future_date,
    is_past_date,
    resolve_evaluation_timestamp,
    resolve_now,
    to_unix_timestamp,
)

NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


class TestResolveClock:
    """Test clock resolution at the boundary."""

    def test_explicit_timestamp_wins(self):
        """Should return an explicit timestamp unchanged."""
        assert resolve_evaluation_timestamp(1_700_000_000) == 1_700_000_000
        assert resolve_evaluation_timestamp(0) == 0

    def test_falls_back_to_wall_clock(self):
        """Should read the wall clock only when no timestamp is given."""
        with patch('ico_app.utils.time.datetime') as mock_datetime:
            mock_datetime.now.return_value = datetime(2024, 1, 1, 0, 0, 0, 500000, tzinfo=timezone.utc)

            result = resolve_evaluation_timestamp(None)

            assert result == 1704067200
            mock_datetime.now.assert_called_once_with(timezone.utc)

    def test_resolve_now_prefers_given_time(self):
        """Should use the given time when provided."""
        assert resolve_now(NOW) == NOW

    def test_to_unix_timestamp(self):
        """Should floor to whole seconds."""
        assert to_unix_timestamp("2024-01-01T00:00:00Z") == 1704067200
        assert to_unix_timestamp(1704067200999) == 1704067200

    def test_to_unix_timestamp_raises_on_garbage(self):
        """Should raise for unparseable input."""
        with pytest.raises(TemporalDataError):
            to_unix_timestamp("soon")


class TestDayCounts:
    """Test day differences."""

    def test_days_until(self):
        assert days_until(NOW + timedelta(days=3, hours=5), now=NOW) == 3
        assert days_until(NOW - timedelta(days=1), now=NOW) == 0

    def test_days_since(self):
        assert days_since(NOW - timedelta(days=10), now=NOW) == 10
        assert days_since(NOW + timedelta(days=1), now=NOW) == 0

    def test_garbage_gives_zero(self):
        """Should degrade to zero for unparseable input."""
        assert days_until("garbage", now=NOW) == 0
        assert days_since("garbage", now=NOW) == 0

    def test_future_and_past(self):
        assert is_future_date(NOW + timedelta(seconds=1), now=NOW) is True
        assert is_past_date(NOW - timedelta(seconds=1), now=NOW) is True
        assert is_future_date("garbage", now=NOW) is False
        assert is_past_date("garbage", now=NOW) is False


class TestFormatting:
    """Test display formatting with placeholders."""

    def test_format_date(self):
        assert format_date(datetime(2024, 1, 5, tzinfo=timezone.utc)) == "Jan 05, 2024"
        assert format_date("2024-01-05T10:30:00Z", "%Y-%m-%d") == "2024-01-05"

    def test_format_datetime(self):
        assert format_datetime("2024-01-05T10:30:00Z") == "Jan 05, 2024 10:30"

    def test_empty_values_render_placeholder(self):
        """Should render N/A for empty input."""
        assert format_date(None) == "N/A"
        assert format_date("") == "N/A"
        assert format_date(0) == "N/A"

    def test_invalid_values_render_invalid_date(self):
        """Should render Invalid date instead of raising."""
        assert format_date("not a date") == "Invalid date"

    def test_display_params(self):
        """Should take formats and placeholders from DisplayParams."""
        params = DisplayParams(
            date_format="%Y-%m-%d",
            datetime_format="%Y-%m-%d %H:%M",
            empty_placeholder="-",
            invalid_placeholder="?",
        )

        assert format_date("2024-01-05T10:30:00Z", params=params) == "2024-01-05"
        assert format_date("2024-01-05T10:30:00Z", "%d/%m", params) == "05/01"
        assert format_datetime("2024-01-05T10:30:00Z", params) == "2024-01-05 10:30"
        assert format_date(None, params=params) == "-"
        assert format_date("not a date", params=params) == "?"
        assert format_relative_time(None, now=NOW, params=params) == "-"
        assert format_countdown("garbage", now=NOW, params=params) == "-"

    def test_relative_time(self):
        """Should describe distance with the largest whole unit."""
        assert format_relative_time(NOW - timedelta(days=3), now=NOW) == "3 days ago"
        assert format_relative_time(NOW + timedelta(hours=1, minutes=5), now=NOW) == "in 1 hour"
        assert format_relative_time(NOW - timedelta(seconds=20), now=NOW) == "less than a minute ago"
        assert format_relative_time(NOW - timedelta(days=400), add_suffix=False, now=NOW) == "1 year"

    def test_relative_time_placeholders(self):
        assert format_relative_time(None, now=NOW) == "N/A"
        assert format_relative_time("garbage", now=NOW) == "Unknown time"

    def test_countdown(self):
        """Should render days, hours and minutes left."""
        assert format_countdown(NOW + timedelta(days=1, hours=2, minutes=3), now=NOW) == "1d 2h 3m"
        assert format_countdown(NOW + timedelta(hours=2, minutes=3), now=NOW) == "2h 3m"
        assert format_countdown(NOW + timedelta(minutes=3, seconds=30), now=NOW) == "3m"

    def test_countdown_ended_and_invalid(self):
        assert format_countdown(NOW - timedelta(minutes=1), now=NOW) == "Ended"
        assert format_countdown(NOW, now=NOW) == "Ended"
        assert format_countdown("garbage", now=NOW) == "N/A"
