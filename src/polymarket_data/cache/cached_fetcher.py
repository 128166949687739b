"""Read-through fetch over a KeyedCache."""

import logging
import threading
from dataclasses import dataclass
from typing import Callable

from polymarket_data.cache.keyed_cache import KeyedCache

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheStats:
    """Counters describing cache effectiveness."""

    hits: int
    misses: int
    entries: int


class CachedFetcher:
    """
    Serves a request from the cache while its entry is valid, otherwise runs
    the raw fetch and stores what it returns.

    Failures from the raw fetch propagate unchanged and are never stored, so
    the next call for the same key goes to the network again. Concurrent
    misses for one key are not coalesced; each of them fetches.
    """

    def __init__(self, cache: KeyedCache):
        self._cache = cache
        self._hits = 0
        self._misses = 0
        self._stats_lock = threading.Lock()

    @property
    def cache(self) -> KeyedCache:
        return self._cache

    def fetch(self, request_key: str, raw_fetch: Callable[[], bytes]) -> bytes:
        """Return the payload for request_key, calling raw_fetch only on a miss."""
        entry = self._cache.get(request_key)
        if entry is not None and entry.is_valid(self._cache.now(), self._cache.ttl_seconds):
            self._count(hit=True)
            logger.debug("Cache hit for %s", request_key)
            return entry.payload

        self._count(hit=False)
        logger.debug("Cache %s for %s", "stale" if entry else "miss", request_key)

        payload = raw_fetch()
        self._cache.put(request_key, payload)
        return payload

    def invalidate_all(self) -> None:
        """Clear every cached response."""
        self._cache.invalidate_all()
        logger.info("Response cache invalidated")

    def stats(self) -> CacheStats:
        with self._stats_lock:
            return CacheStats(hits=self._hits, misses=self._misses, entries=len(self._cache))

    def _count(self, hit: bool) -> None:
        with self._stats_lock:
            if hit:
                self._hits += 1
            else:
                self._misses += 1
