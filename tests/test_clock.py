"""Tests for clocks and time-of-day helpers."""

from datetime import date, datetime

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tarot_timer.clock import (
    HOUR_THEMES,
    ManualClock,
    SystemClock,
    clamp_poll_seconds,
    day_progress,
    format_hour,
    greeting_for_hour,
    hour_progress,
    hour_theme,
    minutes_until_next_hour,
)
from tarot_timer.errors import InvalidArgumentError


class TestManualClock:
    """Test the stepped clock."""

    def test_now_and_today(self):
        clock = ManualClock(datetime(2025, 1, 15, 9, 30))
        assert clock.now() == datetime(2025, 1, 15, 9, 30)
        assert clock.today() == date(2025, 1, 15)

    def test_advance_across_midnight(self):
        clock = ManualClock(datetime(2025, 1, 15, 23, 59, 30))
        clock.advance(seconds=45)
        assert clock.today() == date(2025, 1, 16)

    def test_set(self):
        clock = ManualClock(datetime(2025, 1, 15, 9, 30))
        clock.set(datetime(2025, 3, 1, 0, 0))
        assert clock.today() == date(2025, 3, 1)


class TestSystemClock:
    """Test the real wall clock."""

    def test_timezone_aware(self):
        clock = SystemClock("Asia/Seoul")
        now = clock.now()

        assert now.tzinfo is not None
        assert clock.timezone == "Asia/Seoul"
        assert clock.today() == now.date()

    def test_unknown_timezone(self):
        with pytest.raises(ValueError, match="Unknown timezone"):
            SystemClock("Mars/Olympus_Mons")

    def test_unknown_timezone_is_invalid_argument(self):
        with pytest.raises(InvalidArgumentError):
            SystemClock("Mars/Olympus")


class TestTimeHelpers:
    """Test countdown and progress helpers."""

    @pytest.mark.parametrize(
        "moment,expected",
        [
            (datetime(2025, 1, 15, 9, 0, 0), 60),
            (datetime(2025, 1, 15, 9, 30, 0), 30),
            (datetime(2025, 1, 15, 9, 30, 30), 29),
            (datetime(2025, 1, 15, 9, 59, 59), 0),
        ],
    )
    def test_minutes_until_next_hour(self, moment, expected):
        assert minutes_until_next_hour(moment) == expected

    def test_hour_progress(self):
        assert hour_progress(datetime(2025, 1, 15, 9, 0)) == 0
        assert hour_progress(datetime(2025, 1, 15, 9, 30)) == 0.5

    def test_day_progress(self):
        assert day_progress(datetime(2025, 1, 15, 0, 0)) == 0
        assert day_progress(datetime(2025, 1, 15, 12, 0)) == 50
        assert day_progress(datetime(2025, 1, 15, 23, 59)) == 100

    @given(moment=st.datetimes())
    def test_progress_bounds(self, moment):
        assert 0 <= hour_progress(moment) < 1
        assert 0 <= day_progress(moment) <= 100
        assert 0 <= minutes_until_next_hour(moment) <= 60


class TestHourText:
    """Test greetings, themes and hour labels."""

    @pytest.mark.parametrize(
        "hour,greeting",
        [
            (4, "Good Night"),
            (5, "Good Morning"),
            (11, "Good Morning"),
            (12, "Good Afternoon"),
            (17, "Good Evening"),
            (21, "Good Night"),
        ],
    )
    def test_greeting(self, hour, greeting):
        assert greeting_for_hour(hour) == greeting

    @pytest.mark.parametrize(
        "hour,label",
        [(0, "12:00 AM"), (9, "9:00 AM"), (12, "12:00 PM"), (23, "11:00 PM")],
    )
    def test_format_12h(self, hour, label):
        assert format_hour(hour) == label

    def test_format_24h(self):
        assert format_hour(9, format_24h=True) == "09:00"
        assert format_hour(23, format_24h=True) == "23:00"

    def test_every_hour_has_theme(self):
        assert sorted(HOUR_THEMES) == list(range(24))
        assert hour_theme(3).startswith("Witching Hour")

    def test_bad_hour(self):
        with pytest.raises(InvalidArgumentError):
            format_hour(24)
        with pytest.raises(InvalidArgumentError):
            greeting_for_hour(-1)


class TestPollInterval:
    """Test that polling never waits longer than a minute."""

    @pytest.mark.parametrize(
        "seconds,expected",
        [(None, 60), (0, 60), (-5, 60), (1, 1), (30, 30), (600, 60)],
    )
    def test_clamp(self, seconds, expected):
        assert clamp_poll_seconds(seconds) == expected
