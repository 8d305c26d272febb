"""
Core data structures for periods and work schedules.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import date
from typing import Iterator, List, Union

from datelib.errors import InvalidArgumentError
from datelib.utils.date import DateLike


@dataclass(frozen=True)
class DatePeriod:
    """A date range whose start and end are both members."""

    start: DateLike
    end: DateLike


PeriodLike = Union[DatePeriod, Mapping, Sequence]


def as_period(period: PeriodLike) -> DatePeriod:
    """Accept a DatePeriod, a {'start', 'end'} mapping or a (start, end) pair."""
    if isinstance(period, DatePeriod):
        return period
    if isinstance(period, Mapping):
        try:
            return DatePeriod(period["start"], period["end"])
        except KeyError as exc:
            raise InvalidArgumentError(f"Period is missing {exc.args[0]!r}") from exc
    if isinstance(period, Sequence) and not isinstance(period, str):
        if len(period) != 2:
            raise InvalidArgumentError(f"Period needs exactly two dates, got {len(period)}")
        return DatePeriod(period[0], period[1])
    raise TypeError(f"Unsupported type for period: {type(period)}")


def _check_run_length(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidArgumentError(f"{name} must be positive, got {value}")


@dataclass(frozen=True)
class WorkScheduleSpec:
    """A period worked in repeating runs of ``work_days`` on, ``off_days`` off."""

    period: DatePeriod
    work_days: int
    off_days: int

    def __post_init__(self):
        object.__setattr__(self, "period", as_period(self.period))
        _check_run_length("work_days", self.work_days)
        _check_run_length("off_days", self.off_days)

    @property
    def cycle_length(self) -> int:
        return self.work_days + self.off_days

    def is_work_day(self, days_since_start: int) -> bool:
        return days_since_start % self.cycle_length < self.work_days

    def iter_work_days(self) -> Iterator[date]:
        from .generator import iter_work_days

        return iter_work_days(self)

    def generate(self) -> List[str]:
        from .generator import generate_schedule

        return generate_schedule(self)
