"""
Basic enums shared by the calendar helpers.
"""

from enum import IntEnum


class Weekday(IntEnum):
    """Days of the week, numbered like ``date.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def full_name(self) -> str:
        return self.name.capitalize()

    @property
    def is_weekend(self) -> bool:
        return self in (Weekday.SATURDAY, Weekday.SUNDAY)


class Quarter(IntEnum):
    """Calendar quarters."""

    Q1 = 1  # Jan-Mar
    Q2 = 2  # Apr-Jun
    Q3 = 3  # Jul-Sep
    Q4 = 4  # Oct-Dec

    @classmethod
    def from_month(cls, month: int) -> "Quarter":
        return cls((month - 1) // 3 + 1)
