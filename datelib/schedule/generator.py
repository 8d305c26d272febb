"""
Work schedule generation.
"""

import logging
from datetime import date
from typing import Iterator, List, Tuple

import numpy as np

from datelib.errors import InvalidArgumentError
from datelib.utils.date import DateLike, format_dmy, parse_dmy, to_date

from .core import DatePeriod, PeriodLike, WorkScheduleSpec

logger = logging.getLogger(__name__)


def _endpoint(value: DateLike) -> date:
    """Period endpoints are 'DD-MM-YYYY' text or any date-like value."""
    if isinstance(value, str):
        return parse_dmy(value)
    return to_date(value)


def _bounds(period: DatePeriod) -> Tuple[date, date]:
    start = _endpoint(period.start)
    end = _endpoint(period.end)
    if start > end:
        raise InvalidArgumentError(f"Period start {start} is after end {end}")
    return start, end


def iter_work_days(spec: WorkScheduleSpec) -> Iterator[date]:
    """Yield the working days of ``spec`` in calendar order."""
    start, end = _bounds(spec.period)
    days = np.arange(
        np.datetime64(start, "D"), np.datetime64(end, "D") + 1, dtype="datetime64[D]"
    )
    # Position in the work/off cycle, counted from the first day of the period
    mask = np.arange(days.size) % spec.cycle_length < spec.work_days
    logger.debug(
        "Schedule %s..%s: %d of %d days worked", start, end, int(mask.sum()), days.size
    )
    return iter(days[mask].tolist())


def generate_schedule(spec: WorkScheduleSpec) -> List[str]:
    """Working days of ``spec`` formatted as 'DD-MM-YYYY'."""
    return [format_dmy(day) for day in iter_work_days(spec)]


def get_work_schedule(period: PeriodLike, work_days: int, off_days: int) -> List[str]:
    """
    Generate a work schedule over an inclusive period.

    Args:
        period: start and end dates, 'DD-MM-YYYY' text or date values
        work_days: number of consecutive working days
        off_days: number of consecutive days off

    Returns:
        Working days as 'DD-MM-YYYY' strings

    Example:
        {'start': '01-01-2024', 'end': '15-01-2024'}, 1, 3
        -> ['01-01-2024', '05-01-2024', '09-01-2024', '13-01-2024']
    """
    return generate_schedule(WorkScheduleSpec(period, work_days, off_days))
