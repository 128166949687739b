"""Polymarket data service: cached single-endpoint fetches."""

from typing import Optional

from polymarket_data.cache import CachedFetcher, CacheStats
from polymarket_data.domain.models import (
    PnLDataPoint,
    PnLFidelity,
    PnLInterval,
    Position,
    PositionsQuery,
    SearchResult,
)
from polymarket_data.providers.endpoints import PolymarketEndpoints
from polymarket_data.providers.raw_fetcher import RawFetcher
from polymarket_data.services import decoders


class PolymarketDataService:
    """
    Service for fetching portfolio, PnL, positions and event search results.

    Every request goes through the shared CachedFetcher keyed by its URL.
    NetworkError, DecodeError and InvalidRequestError propagate to the caller.
    """

    def __init__(
        self,
        fetcher: RawFetcher,
        cached_fetcher: CachedFetcher,
        endpoints: Optional[PolymarketEndpoints] = None,
    ):
        self._fetcher = fetcher
        self._cached = cached_fetcher
        self._endpoints = endpoints or PolymarketEndpoints()

    def fetch_portfolio(self, user_id: str) -> float:
        """Total current value of the user's portfolio."""
        url = self._endpoints.portfolio_url(user_id)
        return decoders.decode_portfolio_value(self._fetch(url))

    def fetch_pnl(
        self,
        user_id: str,
        interval: PnLInterval = PnLInterval.DAY,
        fidelity: Optional[PnLFidelity] = None,
    ) -> list[PnLDataPoint]:
        """
        PnL series for the interval.

        Fidelity defaults per interval (see PnLInterval.default_fidelity).
        Malformed points are dropped rather than failing the series.
        """
        effective_fidelity = fidelity or interval.default_fidelity
        url = self._endpoints.pnl_url(user_id, interval, effective_fidelity)
        return decoders.decode_pnl_series(self._fetch(url))

    def fetch_positions(
        self,
        user_id: str,
        query: Optional[PositionsQuery] = None,
    ) -> list[Position]:
        """Open positions, filtered and ordered by query."""
        url = self._endpoints.positions_url(user_id, query or PositionsQuery())
        return decoders.decode_positions(self._fetch(url))

    def search_events(self, query: str, category: str = "all", page: int = 1) -> SearchResult:
        """Search market events by free text."""
        url = self._endpoints.search_url(query, category=category, page=page)
        return decoders.decode_search_result(self._fetch(url))

    def invalidate_cache(self) -> None:
        """Drop every cached response (e.g. on logout or pull-to-refresh)."""
        self._cached.invalidate_all()

    def cache_stats(self) -> CacheStats:
        return self._cached.stats()

    def _fetch(self, url: str) -> bytes:
        return self._cached.fetch(url, lambda: self._fetcher.get(url))
