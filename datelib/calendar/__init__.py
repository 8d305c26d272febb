"""Calendar calculations on single dates, months and periods."""

from .aggregation import (
    get_count_weekdays_in_month,
    get_count_weekends_in_month,
    is_leap_year,
)
from .formatting import date_to_timestamp, format_date, get_day_name, get_time
from .periods import (
    get_count_days_in_month,
    get_count_days_on_period,
    get_month_end,
    get_quarter,
    is_date_in_period,
)
from .weekdays import (
    get_next_friday,
    get_next_friday_the_13th,
    get_week_number_by_date,
)
