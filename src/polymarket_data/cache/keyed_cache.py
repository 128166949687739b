"""
Thread-safe keyed cache of raw response payloads.

Entries are keyed by the canonical request identity (the full request URL)
and carry the clock reading taken when they were stored. The cache itself
never decides validity; readers compare entries against ``ttl_seconds``.
"""

import threading
import time
from typing import Callable, Optional

from polymarket_data.domain.models import CacheEntry

DEFAULT_TTL_SECONDS = 300


class KeyedCache:
    """
    Mapping of request key -> CacheEntry guarded by a single lock.

    get/put/invalidate_all are each atomic. Stale entries stay in the map
    until the same key is stored again or the whole cache is invalidated.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._ttl = ttl_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def now(self) -> float:
        """Current reading of the cache clock."""
        return self._clock()

    def get(self, key: str) -> Optional[CacheEntry]:
        """Return the entry stored under key, valid or not."""
        with self._lock:
            return self._entries.get(key)

    def put(self, key: str, payload: bytes) -> CacheEntry:
        """Store payload under key, replacing any previous entry."""
        entry = CacheEntry(payload=bytes(payload), created_at=self._clock())
        with self._lock:
            self._entries[key] = entry
        return entry

    def invalidate_all(self) -> None:
        """Drop every entry."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
