"""Timezone utilities for API timestamps (always UTC)."""

from datetime import datetime
from typing import Optional

import pytz
from dateutil import parser as date_parser

UTC_TZ = pytz.utc


def now_utc() -> datetime:
    """Return current time in UTC."""
    return datetime.now(UTC_TZ)


def from_unix_seconds(seconds: int) -> datetime:
    """Convert a unix timestamp in seconds to an aware UTC datetime."""
    return datetime.fromtimestamp(seconds, tz=UTC_TZ)


def to_utc(dt: datetime) -> datetime:
    """Convert a datetime to UTC."""
    if dt.tzinfo is None:
        # Naive timestamps from the API are already UTC
        return UTC_TZ.localize(dt)
    return dt.astimezone(UTC_TZ)


def parse_datetime_utc(value: Optional[str]) -> Optional[datetime]:
    """
    Parse a date/datetime string and return it in UTC.

    Returns None for empty or unparsable input.
    """
    if not value:
        return None
    try:
        dt = date_parser.parse(value)
    except (ValueError, OverflowError):
        return None
    return to_utc(dt)
