"""
Weekday navigation: next Friday, next Friday the 13th and ISO week numbers.
"""

import logging
from datetime import date, datetime, timedelta
from typing import Optional, Union

from dateutil import tz as dateutil_tz

from datelib.conventions.timezones import TzLike
from datelib.conventions.types import Weekday
from datelib.utils.date import DateLike, to_date, to_wall_clock

logger = logging.getLogger(__name__)

DAYS_IN_WEEK = 7
ONE_WEEK = timedelta(days=DAYS_IN_WEEK)


def _shift(value: Union[date, datetime], delta: timedelta) -> Union[date, datetime]:
    # Aware wall times skipped by a DST change move forward past the gap
    shifted = value + delta
    if isinstance(shifted, datetime) and shifted.tzinfo is not None:
        return dateutil_tz.resolve_imaginary(shifted)
    return shifted


def days_until(weekday: Weekday, current: int) -> int:
    """Days from ``current`` (date.weekday()) to the next ``weekday``, always 1..7."""
    return (weekday - current) % DAYS_IN_WEEK or DAYS_IN_WEEK


def get_next_friday(
    date: DateLike, *, tz: Optional[TzLike] = None
) -> Union[date, datetime]:
    """
    The next Friday strictly after ``date``, keeping the time of day.

    A Friday maps to the Friday one week later.

    Examples:
        2024-02-03 -> 2024-02-09
        2024-02-16 -> 2024-02-23
    """
    value = to_wall_clock(date, tz)
    return _shift(value, timedelta(days=days_until(Weekday.FRIDAY, value.weekday())))


def get_next_friday_the_13th(
    date: DateLike, *, tz: Optional[TzLike] = None
) -> Union[date, datetime]:
    """
    The first Friday the 13th strictly after ``date``.

    Examples:
        2024-01-13 -> 2024-09-13
        2023-02-01 -> 2023-10-13
    """
    candidate = get_next_friday(date, tz=tz)
    weeks = 0
    while candidate.day != 13:
        candidate = _shift(candidate, ONE_WEEK)
        weeks += 1
    logger.debug("Friday the 13th found after %d weeks: %s", weeks, candidate)
    return candidate


def _week_one_start(year: int) -> date:
    # Week 1 is the Monday-start week holding 4 January (the first Thursday)
    jan4 = date(year, 1, 4)
    return jan4 - timedelta(days=jan4.weekday())


def get_week_number_by_date(date: DateLike, *, tz: Optional[TzLike] = None) -> int:
    """
    ISO-8601 week number (weeks start on Monday, week 1 holds the first Thursday).

    Examples:
        2024-01-03 -> 1
        2024-01-31 -> 5
        2024-02-23 -> 8
    """
    day = to_date(date, tz)
    start = _week_one_start(day.year)
    if day < start:
        start = _week_one_start(day.year - 1)
    elif day.year < 9999 and day >= _week_one_start(day.year + 1):
        return 1

    diff_in_days = round((day - start) / timedelta(days=1))
    return diff_in_days // DAYS_IN_WEEK + 1
