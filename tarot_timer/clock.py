"""Wall-clock sources and time-of-day helpers.

The timeline controller never reads the system time directly; it is handed a
Clock so tests and demos can supply a stepped clock instead.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime, timedelta
from typing import Optional

import pytz

from tarot_timer.errors import InvalidArgumentError
from tarot_timer.models import validate_hour

DEFAULT_TIMEZONE = "Asia/Seoul"
MAX_POLL_SECONDS = 60


class Clock(ABC):
    """Abstract wall-clock source."""

    @abstractmethod
    def now(self) -> datetime:
        """Get the current local time.

        Returns:
            Current datetime in the clock's timezone.
        """
        pass

    def today(self) -> date:
        """Get the current local calendar date."""
        return self.now().date()


class SystemClock(Clock):
    """Real wall clock in a configured timezone."""

    def __init__(self, timezone: str = DEFAULT_TIMEZONE):
        """Initialize the clock.

        Args:
            timezone: IANA timezone name (e.g., 'Asia/Seoul').

        Raises:
            InvalidArgumentError: If the timezone is unknown.
        """
        try:
            self._tz = pytz.timezone(timezone)
        except pytz.UnknownTimeZoneError:
            raise InvalidArgumentError(f"Unknown timezone: {timezone}") from None

    @property
    def timezone(self) -> str:
        return self._tz.zone

    def now(self) -> datetime:
        return datetime.now(self._tz)


class ManualClock(Clock):
    """Clock that only moves when told to."""

    def __init__(self, start: datetime):
        self._now = start

    def now(self) -> datetime:
        return self._now

    def set(self, moment: datetime) -> None:
        self._now = moment

    def advance(
        self, *, days: int = 0, hours: int = 0, minutes: int = 0, seconds: int = 0
    ) -> datetime:
        self._now += timedelta(days=days, hours=hours, minutes=minutes, seconds=seconds)
        return self._now


# ==================== Time-of-day helpers ====================

HOUR_THEMES = {
    0: "Midnight Hour - Deep introspection",
    1: "Late Night - Shadow work",
    2: "Deep Night - Dream wisdom",
    3: "Witching Hour - Mystical insights",
    4: "Pre-dawn - Transformation",
    5: "Dawn - New beginnings",
    6: "Early Morning - Fresh perspectives",
    7: "Morning - Action and energy",
    8: "Work Begin - Productivity",
    9: "Mid-morning - Focus and clarity",
    10: "Active Hour - Achievement",
    11: "Pre-noon - Preparation",
    12: "Noon - Peak energy",
    13: "Early Afternoon - Balance",
    14: "Mid-afternoon - Creativity",
    15: "Active Afternoon - Communication",
    16: "Late Afternoon - Connection",
    17: "Evening Begin - Reflection",
    18: "Dinner Hour - Nourishment",
    19: "Evening - Relationships",
    20: "Night Begin - Relaxation",
    21: "Late Evening - Contemplation",
    22: "Night Time - Rest preparation",
    23: "Pre-midnight - Day completion",
}


def minutes_until_next_hour(now: datetime) -> int:
    """Whole minutes left before the next hour starts."""
    elapsed = now.minute * 60 + now.second
    return (3600 - elapsed) // 60


def hour_progress(now: datetime) -> float:
    """Fraction (0-1) of the current hour that has elapsed."""
    return (now.minute * 60 + now.second) / 3600


def day_progress(now: datetime) -> int:
    """Percentage (0-100) of the day that has elapsed."""
    return round((now.hour * 60 + now.minute) / 1440 * 100)


def greeting_for_hour(hour: int) -> str:
    hour = validate_hour(hour)
    if 5 <= hour < 12:
        return "Good Morning"
    if 12 <= hour < 17:
        return "Good Afternoon"
    if 17 <= hour < 21:
        return "Good Evening"
    return "Good Night"


def format_hour(hour: int, format_24h: bool = False) -> str:
    """Format an hour as '09:00' or '9:00 AM'."""
    hour = validate_hour(hour)
    if format_24h:
        return f"{hour:02d}:00"
    period = "PM" if hour >= 12 else "AM"
    display = 12 if hour % 12 == 0 else hour % 12
    return f"{display}:00 {period}"


def hour_theme(hour: int) -> str:
    return HOUR_THEMES[validate_hour(hour)]


def clamp_poll_seconds(seconds: Optional[float]) -> float:
    """Keep the poll interval within (0, 60] so rollover is seen every minute."""
    if seconds is None or seconds <= 0:
        return MAX_POLL_SECONDS
    return min(float(seconds), MAX_POLL_SECONDS)
