"""In-memory response cache."""

from polymarket_data.cache.keyed_cache import KeyedCache, DEFAULT_TTL_SECONDS
from polymarket_data.cache.cached_fetcher import CachedFetcher, CacheStats

__all__ = [
    "KeyedCache",
    "DEFAULT_TTL_SECONDS",
    "CachedFetcher",
    "CacheStats",
]
