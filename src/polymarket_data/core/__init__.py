"""Core utilities and shared functionality."""

from polymarket_data.core.timezone import (
    now_utc,
    from_unix_seconds,
    to_utc,
    parse_datetime_utc,
    UTC_TZ,
)
from polymarket_data.core.exceptions import (
    AppError,
    NetworkError,
    DecodeError,
    InvalidRequestError,
)

__all__ = [
    "now_utc",
    "from_unix_seconds",
    "to_utc",
    "parse_datetime_utc",
    "UTC_TZ",
    "AppError",
    "NetworkError",
    "DecodeError",
    "InvalidRequestError",
]
