import pytest

from datelib.conventions import timezones


@pytest.fixture(autouse=True)
def utc_reference_zone(monkeypatch):
    """Every test starts with UTC as the reference zone."""
    monkeypatch.setattr(timezones, "_DEFAULT_TZ", timezones.UTC)
    return timezones.UTC
