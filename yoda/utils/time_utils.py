# yoda/utils/time_utils.py
"""
Clock helpers.

Services take a ``Clock`` (a zero-argument callable returning an aware
datetime) so the letter job and stores can be driven by a fake "now" in tests.
"""

from datetime import datetime, timedelta
from typing import Callable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

Clock = Callable[[], datetime]


def get_timezone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except ZoneInfoNotFoundError as exc:
        raise ValueError(f"Invalid timezone: {name}") from exc


def system_clock(tz_name: str = "UTC") -> Clock:
    """Return a clock reading the host time in the given timezone."""
    tz = get_timezone(tz_name)

    def now() -> datetime:
        return datetime.now(tz)

    return now


def date_str(value: datetime, days: int = 0) -> str:
    """Calendar date of ``value`` shifted by ``days``, as YYYY-MM-DD."""
    return (value + timedelta(days=days)).strftime("%Y-%m-%d")


def today_str(clock: Clock) -> str:
    return date_str(clock())
