"""Application context for in-process service management.

Composes the response cache, the raw fetcher and the services built on top
of them. One context owns one cache; tests build their own contexts.
"""

from typing import Optional

from polymarket_data.cache import CachedFetcher, KeyedCache
from polymarket_data.config.settings import Settings, get_settings
from polymarket_data.providers import (
    HttpxFetcher,
    PolymarketEndpoints,
    RawFetcher,
    StubFetcher,
)
from polymarket_data.services import PolymarketDataService, UserDataAggregator


class AppContext:
    """
    Application context providing access to all services.

    Services are created lazily and share a single KeyedCache.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        fetcher: Optional[RawFetcher] = None,
        cache: Optional[KeyedCache] = None,
    ):
        """
        Initialize application context.

        Args:
            settings: Settings to use. Defaults to the process settings.
            fetcher: Raw fetcher. Defaults to the one named by settings.data_provider.
            cache: Response cache. Defaults to a new cache with the configured TTL.
        """
        self._settings = settings or get_settings()
        self._fetcher = fetcher
        self._cache = cache

        # Service instances (lazy initialized)
        self._cached_fetcher: Optional[CachedFetcher] = None
        self._data_service: Optional[PolymarketDataService] = None
        self._aggregator: Optional[UserDataAggregator] = None

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def cache(self) -> KeyedCache:
        """Get the shared KeyedCache instance."""
        if self._cache is None:
            self._cache = KeyedCache(ttl_seconds=self._settings.cache_ttl_seconds)
        return self._cache

    @property
    def fetcher(self) -> RawFetcher:
        """Get the raw fetcher instance."""
        if self._fetcher is None:
            if self._settings.data_provider == "stub":
                self._fetcher = StubFetcher()
            else:
                self._fetcher = HttpxFetcher(timeout_seconds=self._settings.http_timeout_seconds)
        return self._fetcher

    @property
    def cached_fetcher(self) -> CachedFetcher:
        if self._cached_fetcher is None:
            self._cached_fetcher = CachedFetcher(self.cache)
        return self._cached_fetcher

    @property
    def data(self) -> PolymarketDataService:
        """Get the PolymarketDataService instance."""
        if self._data_service is None:
            self._data_service = PolymarketDataService(
                fetcher=self.fetcher,
                cached_fetcher=self.cached_fetcher,
                endpoints=PolymarketEndpoints(
                    data_api_base_url=self._settings.data_api_base_url,
                    pnl_api_base_url=self._settings.pnl_api_base_url,
                    search_api_base_url=self._settings.search_api_base_url,
                ),
            )
        return self._data_service

    @property
    def aggregator(self) -> UserDataAggregator:
        """Get the UserDataAggregator instance."""
        if self._aggregator is None:
            self._aggregator = UserDataAggregator(
                data_service=self.data,
                timeout_seconds=self._settings.aggregate_timeout_seconds,
            )
        return self._aggregator

    def close(self) -> None:
        """Clean up resources."""
        if isinstance(self._fetcher, HttpxFetcher):
            self._fetcher.close()
        self._fetcher = None
        self._data_service = None
        self._aggregator = None


# Global application context (shared by all API requests)
_app_context: Optional[AppContext] = None


def get_app_context() -> AppContext:
    """Get or create the global application context."""
    global _app_context
    if _app_context is None:
        _app_context = AppContext()
    return _app_context


def set_app_context(context: Optional[AppContext]) -> None:
    """Set the global application context."""
    global _app_context
    _app_context = context
