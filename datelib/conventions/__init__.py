# Re-export conventions
from .timezones import (
    UTC,
    get_default_timezone,
    resolve_timezone,
    set_default_timezone,
)
from .types import Quarter, Weekday
