"""
tests/schedule/test_work_schedule.py

Covers:
  - Work/off cycles over an inclusive DD-MM-YYYY period
  - Cycles crossing month, year and leap-day boundaries
  - WorkScheduleSpec validation and helpers
  - Error cases: non-positive run lengths, bad text, reversed periods
"""

from datetime import date

import typing

import pytest

from datelib import DatePeriod, InvalidArgumentError, ParseError, WorkScheduleSpec
from datelib.schedule import get_work_schedule
from datelib.utils.date import DateLike


@pytest.fixture
def first_half_of_january():
    return {"start": "01-01-2024", "end": "15-01-2024"}


class TestGetWorkSchedule:

    def test_one_on_three_off(self, first_half_of_january):
        assert get_work_schedule(first_half_of_january, 1, 3) == [
            "01-01-2024", "05-01-2024", "09-01-2024", "13-01-2024",
        ]

    def test_alternating_days(self):
        assert get_work_schedule({"start": "01-01-2024", "end": "10-01-2024"}, 1, 1) == [
            "01-01-2024", "03-01-2024", "05-01-2024", "07-01-2024", "09-01-2024",
        ]

    def test_crosses_year_end(self):
        assert get_work_schedule({"start": "30-12-2023", "end": "05-01-2024"}, 2, 1) == [
            "30-12-2023", "31-12-2023", "02-01-2024", "03-01-2024", "05-01-2024",
        ]

    def test_crosses_leap_day(self):
        assert get_work_schedule({"start": "27-02-2024", "end": "02-03-2024"}, 1, 1) == [
            "27-02-2024", "29-02-2024", "02-03-2024",
        ]

    def test_single_day_period(self):
        assert get_work_schedule({"start": "07-03-2024", "end": "07-03-2024"}, 3, 4) == [
            "07-03-2024",
        ]

    def test_period_shorter_than_work_run(self, first_half_of_january):
        assert len(get_work_schedule(first_half_of_january, 30, 1)) == 15

    def test_early_years_keep_four_digits(self):
        assert get_work_schedule({"start": "01-01-0999", "end": "03-01-0999"}, 1, 1) == [
            "01-01-0999", "03-01-0999",
        ]

    def test_date_endpoints(self):
        period = DatePeriod(date(2024, 1, 1), date(2024, 1, 15))
        assert get_work_schedule(period, 1, 3) == [
            "01-01-2024", "05-01-2024", "09-01-2024", "13-01-2024",
        ]

    @pytest.mark.parametrize("work_days, off_days", [(0, 3), (1, 0), (-1, 3), (1, -2)])
    def test_non_positive_runs_raise(self, first_half_of_january, work_days, off_days):
        with pytest.raises(InvalidArgumentError):
            get_work_schedule(first_half_of_january, work_days, off_days)

    @pytest.mark.parametrize("work_days, off_days", [(1.5, 3), (1, "3"), (True, 1)])
    def test_non_integer_runs_raise(self, first_half_of_january, work_days, off_days):
        with pytest.raises(InvalidArgumentError):
            get_work_schedule(first_half_of_january, work_days, off_days)

    @pytest.mark.parametrize("text", ["2024-01-01", "32-01-2024", "01/01/2024", ""])
    def test_bad_endpoint_text_raises(self, text):
        with pytest.raises(ParseError):
            get_work_schedule({"start": text, "end": "15-01-2024"}, 1, 1)

    def test_reversed_period_raises(self):
        with pytest.raises(InvalidArgumentError):
            get_work_schedule({"start": "15-01-2024", "end": "01-01-2024"}, 1, 1)


class TestWorkScheduleSpec:

    def test_cycle_length(self, first_half_of_january):
        assert WorkScheduleSpec(first_half_of_january, 2, 5).cycle_length == 7

    def test_period_normalised_to_dataclass(self, first_half_of_january):
        spec = WorkScheduleSpec(first_half_of_january, 1, 3)
        assert spec.period == DatePeriod("01-01-2024", "15-01-2024")

    def test_is_work_day(self, first_half_of_january):
        spec = WorkScheduleSpec(first_half_of_january, 2, 1)
        assert [spec.is_work_day(n) for n in range(6)] == [True, True, False] * 2

    def test_iter_work_days_yields_dates(self, first_half_of_january):
        days = list(WorkScheduleSpec(first_half_of_january, 1, 3).iter_work_days())
        assert days == [date(2024, 1, d) for d in (1, 5, 9, 13)]

    def test_generate_matches_function(self, first_half_of_january):
        spec = WorkScheduleSpec(first_half_of_january, 2, 2)
        assert spec.generate() == get_work_schedule(first_half_of_january, 2, 2)

    def test_period_fields_typed_as_dates(self):
        hints = typing.get_type_hints(DatePeriod)
        assert hints["start"] == DateLike
        assert hints["end"] == DateLike
        assert DatePeriod(date(2024, 1, 1), "15-01-2024").end == "15-01-2024"

    def test_validated_on_construction(self, first_half_of_january):
        with pytest.raises(InvalidArgumentError):
            WorkScheduleSpec(first_half_of_january, 0, 1)

    def test_work_days_never_exceed_share_of_cycle(self):
        spec = WorkScheduleSpec({"start": "01-01-2024", "end": "31-12-2024"}, 4, 3)
        worked = spec.generate()
        # 366 days = 52 full cycles (208 worked) + 2 extra working days
        assert len(worked) == 210
        assert len(worked) == len(set(worked))
