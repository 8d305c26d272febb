"""
Month lengths, inclusive period arithmetic and quarters.
"""

from __future__ import annotations

import logging
import math
from datetime import date
from typing import Optional

from dateutil.relativedelta import relativedelta

from datelib.conventions.timezones import TzLike
from datelib.conventions.types import Quarter
from datelib.errors import InvalidArgumentError
from datelib.schedule.core import DatePeriod, PeriodLike, as_period
from datelib.utils.date import ONE_DAY, ONE_MILLISECOND, DateLike, to_timestamp_ms, to_wall_clock

logger = logging.getLogger(__name__)

MIN_YEAR = 1
MAX_YEAR = 9999

MS_PER_DAY = ONE_DAY // ONE_MILLISECOND


def validate_month_year(month: int, year: int) -> None:
    """Reject months outside 1-12 and years outside 1-9999."""
    if isinstance(month, bool) or not isinstance(month, int):
        raise InvalidArgumentError(f"month must be an integer, got {month!r}")
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidArgumentError(f"year must be an integer, got {year!r}")
    if not 1 <= month <= 12:
        raise InvalidArgumentError(f"month must be in 1..12, got {month}")
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidArgumentError(f"year must be in {MIN_YEAR}..{MAX_YEAR}, got {year}")


def get_month_end(year: int, month: int) -> date:
    """Last calendar day of a month (relativedelta clamps day=31 to the month end)."""
    validate_month_year(month, year)
    return date(year, month, 1) + relativedelta(day=31)


def get_count_days_in_month(month: int, year: int) -> int:
    """
    Number of days in ``month`` (1-12) of ``year``.

    Examples:
        1, 2024 -> 31
        2, 2024 -> 29
    """
    last = get_month_end(year, month)
    return (last - date(year, month, 1)).days + 1


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def get_count_days_on_period(
    date_start: DateLike, date_end: DateLike, *, tz: Optional[TzLike] = None
) -> int:
    """
    Days between two dates counting both ends.

    The elapsed time is rounded to whole days so that a DST change inside the
    period does not drop a day.

    Examples:
        '2024-02-01T00:00:00.000Z', '2024-02-02T00:00:00.000Z' -> 2
        '2024-02-01T00:00:00.000Z', '2024-02-12T00:00:00.000Z' -> 12
    """
    start = to_timestamp_ms(date_start, tz)
    end = to_timestamp_ms(date_end, tz)
    if start > end:
        raise InvalidArgumentError(f"Period start {date_start!r} is after end {date_end!r}")
    elapsed = (end - start) / MS_PER_DAY
    logger.debug("Period %r..%r spans %.4f days", date_start, date_end, elapsed)
    return _round_half_up(elapsed) + 1


def is_date_in_period(
    date: DateLike, period: PeriodLike, *, tz: Optional[TzLike] = None
) -> bool:
    """True if ``date`` lies in the period, both ends included."""
    bounds: DatePeriod = as_period(period)
    value = to_timestamp_ms(date, tz)
    start = to_timestamp_ms(bounds.start, tz)
    end = to_timestamp_ms(bounds.end, tz)
    if start > end:
        raise InvalidArgumentError(f"Period start {bounds.start!r} is after end {bounds.end!r}")
    return start <= value <= end


def get_quarter(date: DateLike, *, tz: Optional[TzLike] = None) -> Quarter:
    """Quarter of the year (1-4), e.g. 2024-06-01 -> 2."""
    return Quarter.from_month(to_wall_clock(date, tz).month)
