"""
Timestamp conversion and human-readable formatting.
"""

from typing import Optional

from datelib.conventions.timezones import UTC, TzLike, resolve_timezone
from datelib.conventions.types import Weekday
from datelib.utils.date import DateLike, to_datetime, to_timestamp_ms, to_wall_clock


def date_to_timestamp(date_string: DateLike, *, tz: Optional[TzLike] = None) -> int:
    """
    Milliseconds elapsed since 00:00:00 UTC on 1 January 1970.

    Examples:
        '01 Jan 1970 00:00:00 UTC' -> 0
        '04 Dec 1995 00:12:00 UTC' -> 818035920000
    """
    return to_timestamp_ms(date_string, tz)


def get_time(date: DateLike, *, tz: Optional[TzLike] = None) -> str:
    """Return the 24-hour wall-clock time as 'hh:mm:ss'."""
    value = to_wall_clock(date, tz)
    hour = getattr(value, "hour", 0)
    minute = getattr(value, "minute", 0)
    second = getattr(value, "second", 0)
    return f"{hour:02d}:{minute:02d}:{second:02d}"


def get_day_name(date: DateLike, *, tz: Optional[TzLike] = None) -> str:
    """English name of the weekday, e.g. '2024-01-30T00:00:00.000Z' -> 'Tuesday'."""
    return Weekday(to_wall_clock(date, tz).weekday()).full_name


def _twelve_hour(hour: int) -> tuple:
    suffix = "PM" if hour >= 12 else "AM"
    return (hour % 12 or 12), suffix


def format_date(date_string: DateLike, *, tz: Optional[TzLike] = None) -> str:
    """
    Format a date as 'M/D/YYYY, h:mm:ss AM|PM'.

    Day of month and hour are taken from the UTC reading of the instant while
    month, year, minutes and seconds come from the reference zone.  The two
    readings only disagree when the reference zone is not UTC.

    Examples:
        '2024-02-01T15:00:00.000Z' -> '2/1/2024, 3:00:00 PM'
        '1999-01-05T02:20:00.000Z' -> '1/5/1999, 2:20:00 AM'
    """
    zone = resolve_timezone(tz)
    local = to_datetime(date_string, zone)
    utc = local.astimezone(UTC)

    hour, suffix = _twelve_hour(utc.hour)
    return (
        f"{local.month}/{utc.day}/{local.year}, "
        f"{hour}:{local.minute:02d}:{local.second:02d} {suffix}"
    )
