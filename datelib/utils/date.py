from datetime import date, datetime, timedelta, tzinfo
from typing import Optional, Union

import logging
import re
import warnings

import numpy as np
from dateutil import parser as dateutil_parser
from dateutil import tz as dateutil_tz
from pandas import NaT, Timestamp, isna

from datelib.conventions.timezones import UTC, TzLike, resolve_timezone
from datelib.errors import InvalidArgumentError, ParseError

logger = logging.getLogger(__name__)

DateLike = Union[str, date, datetime, Timestamp, np.datetime64]

DATE_FMT = "%Y-%m-%d"
DMY_FMT = "%d-%m-%Y"

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
ONE_DAY = timedelta(days=1)
ONE_MILLISECOND = timedelta(milliseconds=1)

# Fills fields missing from the text so parsing never depends on today's date
PARSE_DEFAULT = datetime(1970, 1, 1)

# RFC 2822 zone names
ZONE_ABBREVIATIONS = {
    name: dateutil_tz.tzoffset(name, hours * 3600)
    for name, hours in (
        ("UT", 0), ("GMT", 0),
        ("EST", -5), ("EDT", -4),
        ("CST", -6), ("CDT", -5),
        ("MST", -7), ("MDT", -6),
        ("PST", -8), ("PDT", -7),
    )
}

# "GMT+0200" means two hours ahead of UTC; dateutil reads the sign POSIX-style
_PREFIXED_OFFSET_RE = re.compile(r"(?<![A-Za-z])(?:GMT|UTC|UT)\s*(?=[+-]\d)", re.IGNORECASE)
# Trailing zone description, e.g. "(Central European Standard Time)"
_ZONE_COMMENT_RE = re.compile(r"\s*\([^()]*\)\s*$")


def localize(naive: datetime, zone: tzinfo) -> datetime:
    """
    Attach ``zone`` to a naive wall-clock datetime.
    Wall times skipped by a DST transition are moved forward past the gap.
    """
    return dateutil_tz.resolve_imaginary(naive.replace(tzinfo=zone))


def parse_datetime(text: str, tz: Optional[TzLike] = None) -> datetime:
    """
    Parse free-form date text into an aware datetime in the reference zone.
    Text without an explicit offset is read as wall-clock time in that zone.
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected date text, got {type(text)}")
    zone = resolve_timezone(tz)
    cleaned = _PREFIXED_OFFSET_RE.sub("", _ZONE_COMMENT_RE.sub("", text))
    try:
        with warnings.catch_warnings():
            warnings.simplefilter("error", dateutil_parser.UnknownTimezoneWarning)
            parsed = dateutil_parser.parse(
                cleaned, default=PARSE_DEFAULT, tzinfos=ZONE_ABBREVIATIONS
            )
    except dateutil_parser.UnknownTimezoneWarning as exc:
        raise ParseError(f"Unknown time zone name in {text!r}") from exc
    except (dateutil_parser.ParserError, OverflowError, ValueError) as exc:
        raise ParseError(f"Unrecognised date format: {text!r}") from exc

    if parsed.tzinfo is None:
        logger.debug("No offset in %r; reading it in %s", text, zone)
        return localize(parsed, zone)
    return parsed.astimezone(zone)


def parse_dmy(text: str) -> date:
    """Parse a 'DD-MM-YYYY' string."""
    try:
        return datetime.strptime(text.strip(), DMY_FMT).date()
    except ValueError as exc:
        raise ParseError(f"Expected DD-MM-YYYY, got {text!r}") from exc


def _from_pandas(value: Union[Timestamp, np.datetime64]) -> datetime:
    if isna(value):
        raise InvalidArgumentError("NaT is not a valid date")
    return Timestamp(value).to_pydatetime(warn=False)


def to_wall_clock(
    date_like: DateLike, tz: Optional[TzLike] = None
) -> Union[date, datetime]:
    """
    Normalise a date-like value for wall-clock arithmetic.

    Plain dates stay dates and naive datetimes stay naive (both are already
    wall-clock values in the reference zone).  Aware datetimes are converted
    into the reference zone and strings are parsed into it.
    """
    if date_like is NaT or isinstance(date_like, (Timestamp, np.datetime64)):
        date_like = _from_pandas(date_like)
    if isinstance(date_like, datetime):
        if date_like.tzinfo is None:
            return date_like
        return date_like.astimezone(resolve_timezone(tz))
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        return parse_datetime(date_like, tz)
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


def to_datetime(date_like: DateLike, tz: Optional[TzLike] = None) -> datetime:
    """Convert any date-like value to an aware datetime in the reference zone."""
    zone = resolve_timezone(tz)
    value = to_wall_clock(date_like, zone)
    if not isinstance(value, datetime):
        value = datetime.combine(value, datetime.min.time())
    if value.tzinfo is None:
        return localize(value, zone)
    return value


def to_date(date_like: DateLike, tz: Optional[TzLike] = None) -> date:
    """Calendar date of a date-like value in the reference zone."""
    value = to_wall_clock(date_like, tz)
    if isinstance(value, datetime):
        return value.date()
    return value


def to_timestamp_ms(date_like: DateLike, tz: Optional[TzLike] = None) -> int:
    """Whole milliseconds since 1970-01-01T00:00:00Z."""
    return (to_datetime(date_like, tz) - EPOCH) // ONE_MILLISECOND


def date_to_str(date_like: DateLike, fmt: str = DATE_FMT) -> str:
    """Format a date-like with a strftime pattern ('YYYY-MM-DD' by default)."""
    return to_date(date_like).strftime(fmt)


def format_dmy(date_like: DateLike) -> str:
    """Format as 'DD-MM-YYYY' with a four-digit year."""
    day = to_date(date_like)
    return f"{day.day:02d}-{day.month:02d}-{day.year:04d}"
