"""
Reference time zone configuration.

Every helper in datelib reads wall-clock fields (hour, weekday, day of month)
in a single reference zone.  The zone defaults to UTC and can be changed for
the whole process with ``set_default_timezone`` or per call with the ``tz``
keyword the helpers accept.
"""

import logging
import os
from datetime import tzinfo
from typing import Optional, Union

from dateutil import tz as dateutil_tz

from datelib.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

UTC: tzinfo = dateutil_tz.UTC

TzLike = Union[str, tzinfo]

_ENV_VAR = "DATELIB_TZ"


def _lookup(name: str) -> tzinfo:
    """Resolve an IANA zone name (or 'UTC', 'local') to a tzinfo."""
    key = name.strip()
    if key.upper() == "UTC":
        return UTC
    if key.lower() == "local":
        return dateutil_tz.tzlocal()
    zone = dateutil_tz.gettz(key)
    if zone is None:
        raise InvalidArgumentError(f"Unknown time zone: {name!r}")
    return zone


def _zone_from_environment() -> tzinfo:
    name = os.environ.get(_ENV_VAR)
    if not name:
        return UTC
    try:
        return _lookup(name)
    except InvalidArgumentError:
        logger.warning("Ignoring %s=%r: unknown time zone, using UTC", _ENV_VAR, name)
        return UTC


_DEFAULT_TZ: tzinfo = _zone_from_environment()


def get_default_timezone() -> tzinfo:
    """Return the process-wide reference zone."""
    return _DEFAULT_TZ


def set_default_timezone(zone: TzLike) -> None:
    """Set the process-wide reference zone from a name or tzinfo."""
    global _DEFAULT_TZ
    _DEFAULT_TZ = resolve_timezone(zone)
    logger.debug("Default reference zone set to %s", _DEFAULT_TZ)


def resolve_timezone(zone: Optional[TzLike] = None) -> tzinfo:
    """Turn a per-call ``tz`` argument into a tzinfo (None -> default zone)."""
    if zone is None:
        return _DEFAULT_TZ
    if isinstance(zone, tzinfo):
        return zone
    if isinstance(zone, str):
        return _lookup(zone)
    raise TypeError(f"Unsupported type for time zone: {type(zone)}")
