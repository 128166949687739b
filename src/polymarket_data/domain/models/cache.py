"""Cache models for fetched response payloads."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CacheEntry:
    """
    Raw response bytes and the clock reading taken when they were stored.

    IMPORTANT: Entries never expire in place; validity is checked on read.
    """

    payload: bytes
    created_at: float

    def is_valid(self, now: float, ttl: float) -> bool:
        """True while less than ``ttl`` seconds have passed since creation."""
        return now - self.created_at < ttl
