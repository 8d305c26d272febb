"""Weekend/weekday counts per month and the leap-year rule."""

from __future__ import annotations

from typing import Tuple, Union

import numpy as np

from datelib.calendar.periods import validate_month_year
from datelib.utils.date import DateLike, to_date

# numpy weekmasks run Monday..Sunday
WEEKDAY_MASK = "1111100"
WEEKEND_MASK = "0000011"


def _month_bounds(month: int, year: int) -> Tuple[np.datetime64, np.datetime64]:
    validate_month_year(month, year)
    first = np.datetime64(f"{year:04d}-{month:02d}", "M")
    return first.astype("datetime64[D]"), (first + 1).astype("datetime64[D]")


def get_count_weekends_in_month(month: int, year: int) -> int:
    """
    Number of Saturdays and Sundays in a month.

    Examples:
        5, 2022 -> 9
        12, 2023 -> 10
        1, 2024 -> 8
    """
    first, following = _month_bounds(month, year)
    return int(np.busday_count(first, following, weekmask=WEEKEND_MASK))


def get_count_weekdays_in_month(month: int, year: int) -> int:
    """Number of Monday-Friday days in a month."""
    first, following = _month_bounds(month, year)
    return int(np.busday_count(first, following, weekmask=WEEKDAY_MASK))


def is_leap_year(date: Union[DateLike, int]) -> bool:
    """
    Gregorian leap-year rule: divisible by 4, except centuries not divisible by 400.
    Accepts a date-like value or a bare year.
    """
    if isinstance(date, int) and not isinstance(date, bool):
        year = date
    else:
        year = to_date(date).year
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)
