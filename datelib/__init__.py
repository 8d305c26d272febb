"""Date utility library.

Stateless helpers for timestamp conversion, formatting, weekday and weekend
counting, period containment, work schedules and the leap-year rule.

Key modules:
- calendar: the date calculations
- schedule: period and work schedule types and generation
- conventions: weekday/quarter enums and the reference time zone
- utils: parsing and coercion of date-like inputs
"""

from .calendar import (
    date_to_timestamp,
    format_date,
    get_count_days_in_month,
    get_count_days_on_period,
    get_count_weekdays_in_month,
    get_count_weekends_in_month,
    get_day_name,
    get_next_friday,
    get_next_friday_the_13th,
    get_quarter,
    get_time,
    get_week_number_by_date,
    is_date_in_period,
    is_leap_year,
)
from .conventions import get_default_timezone, set_default_timezone
from .errors import DateLibError, InvalidArgumentError, ParseError
from .schedule import DatePeriod, WorkScheduleSpec, get_work_schedule

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "date_to_timestamp",
    "get_time",
    "get_day_name",
    "get_next_friday",
    "get_count_days_in_month",
    "get_count_days_on_period",
    "is_date_in_period",
    "format_date",
    "get_count_weekends_in_month",
    "get_count_weekdays_in_month",
    "get_week_number_by_date",
    "get_next_friday_the_13th",
    "get_quarter",
    "get_work_schedule",
    "is_leap_year",
    "DatePeriod",
    "WorkScheduleSpec",
    "DateLibError",
    "ParseError",
    "InvalidArgumentError",
    "get_default_timezone",
    "set_default_timezone",
]
