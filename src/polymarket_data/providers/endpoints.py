"""Request URL construction for the remote APIs."""

import httpx

from polymarket_data.core.exceptions import InvalidRequestError
from polymarket_data.domain.models import PnLFidelity, PnLInterval, PositionsQuery


def _require_user(user_id: str) -> str:
    user = (user_id or "").strip()
    if not user:
        raise InvalidRequestError("user_id must not be empty")
    return user


class PolymarketEndpoints:
    """
    Builds fully-qualified request URLs.

    The returned string is also the request key the cache stores it under,
    so parameter order is fixed.
    """

    def __init__(
        self,
        data_api_base_url: str = "https://data-api.polymarket.com",
        pnl_api_base_url: str = "https://user-pnl-api.polymarket.com",
        search_api_base_url: str = "https://polymarket.com/api",
    ):
        self._data_api = data_api_base_url.rstrip("/")
        self._pnl_api = pnl_api_base_url.rstrip("/")
        self._search_api = search_api_base_url.rstrip("/")

    def portfolio_url(self, user_id: str) -> str:
        return self._build(f"{self._data_api}/value", {"user": _require_user(user_id)})

    def pnl_url(self, user_id: str, interval: PnLInterval, fidelity: PnLFidelity) -> str:
        return self._build(
            f"{self._pnl_api}/user-pnl",
            {
                "user_address": _require_user(user_id),
                "interval": interval.value,
                "fidelity": fidelity.value,
            },
        )

    def positions_url(self, user_id: str, query: PositionsQuery) -> str:
        if query.size_threshold < 0:
            raise InvalidRequestError("size_threshold must not be negative")
        if query.limit < 1:
            raise InvalidRequestError("limit must be at least 1")
        if query.offset < 0:
            raise InvalidRequestError("offset must not be negative")
        if not query.sort_by.strip():
            raise InvalidRequestError("sort_by must not be empty")

        return self._build(
            f"{self._data_api}/positions",
            {
                "user": _require_user(user_id),
                "sizeThreshold": str(query.size_threshold),
                "limit": str(query.limit),
                "offset": str(query.offset),
                "sortBy": query.sort_by.strip(),
                "sortDirection": query.sort_direction.value,
            },
        )

    def search_url(self, query: str, category: str = "all", page: int = 1) -> str:
        if not (query or "").strip():
            raise InvalidRequestError("search query must not be empty")
        if page < 1:
            raise InvalidRequestError("page must be at least 1")
        return self._build(
            f"{self._search_api}/events/search",
            {"_c": category or "all", "_q": query.strip(), "_p": str(page)},
        )

    @staticmethod
    def _build(base: str, params: dict[str, str]) -> str:
        try:
            return str(httpx.URL(base, params=params))
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            raise InvalidRequestError(f"Cannot build request URL for {base}: {e}") from e
