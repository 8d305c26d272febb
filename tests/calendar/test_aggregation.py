"""
tests/calendar/test_aggregation.py

Covers:
  - Weekend counts per month
  - Weekday/weekend split adds up to the month length
  - Leap-year rule for dates, strings and bare years
"""

from datetime import date, datetime

import numpy as np
import pandas as pd
import pytest

from datelib import InvalidArgumentError
from datelib.calendar.aggregation import (
    get_count_weekdays_in_month,
    get_count_weekends_in_month,
    is_leap_year,
)
from datelib.calendar.periods import get_count_days_in_month


def _weekends_by_walking(month, year):
    days = get_count_days_in_month(month, year)
    return sum(1 for d in range(1, days + 1) if date(year, month, d).weekday() >= 5)


class TestWeekendsInMonth:

    @pytest.mark.parametrize(
        "month, year, expected",
        [
            (5, 2022, 9),
            (12, 2023, 10),
            (1, 2024, 8),
            (2, 2015, 8),
            (2, 2020, 9),
        ],
    )
    def test_examples(self, month, year, expected):
        assert get_count_weekends_in_month(month, year) == expected

    @pytest.mark.parametrize("year", [1900, 2000, 2023, 2024])
    def test_agrees_with_day_by_day_walk(self, year):
        for month in range(1, 13):
            assert get_count_weekends_in_month(month, year) == _weekends_by_walking(month, year)

    def test_last_supported_month(self):
        assert get_count_weekends_in_month(12, 9999) == _weekends_by_walking(12, 9999)

    def test_returns_builtin_int(self):
        assert type(get_count_weekends_in_month(1, 2024)) is int

    @pytest.mark.parametrize("month, year", [(0, 2024), (13, 2024), (1, 0)])
    def test_invalid_month_or_year_raises(self, month, year):
        with pytest.raises(InvalidArgumentError):
            get_count_weekends_in_month(month, year)


class TestWeekdaysInMonth:

    def test_january_2024(self):
        assert get_count_weekdays_in_month(1, 2024) == 23

    @pytest.mark.parametrize("year", [2023, 2024])
    def test_split_adds_up_to_month_length(self, year):
        for month in range(1, 13):
            total = get_count_weekends_in_month(month, year) + get_count_weekdays_in_month(
                month, year
            )
            assert total == get_count_days_in_month(month, year)


class TestIsLeapYear:

    @pytest.mark.parametrize(
        "value, expected",
        [
            (date(2000, 6, 1), True),
            (date(1900, 6, 1), False),
            (date(2023, 6, 1), False),
            (datetime(2024, 3, 1), True),
            (datetime(2022, 3, 1), False),
            (datetime(2020, 3, 1), True),
        ],
    )
    def test_dates(self, value, expected):
        assert is_leap_year(value) is expected

    @pytest.mark.parametrize("year, expected", [(2000, True), (1900, False), (2023, False), (2400, True)])
    def test_bare_years(self, year, expected):
        assert is_leap_year(year) is expected

    def test_strings_and_pandas_values(self):
        assert is_leap_year("2024-03-01T00:00:00Z")
        assert is_leap_year(pd.Timestamp("2024-03-01"))
        assert not is_leap_year(np.datetime64("2023-03-01"))

    def test_bool_is_rejected(self):
        with pytest.raises(TypeError):
            is_leap_year(True)

    def test_agrees_with_february_length(self):
        for year in range(1890, 2110):
            assert is_leap_year(year) is (get_count_days_in_month(2, year) == 29)
