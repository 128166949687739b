"""
Pytest configuration and fixtures for the Polymarket data service tests.

This module provides:
- A manually advanced clock for cache TTL tests
- A recording fake fetcher with per-endpoint canned responses
- Canned API payloads
- Cache, service and aggregator fixtures
- A FastAPI test client wired to an isolated AppContext
"""

import json
import threading
from typing import Any, Callable, Union

import httpx
import pytest
from fastapi.testclient import TestClient

from polymarket_data.api.deps import get_context
from polymarket_data.app_context import AppContext
from polymarket_data.cache import CachedFetcher, KeyedCache
from polymarket_data.config.settings import Settings, reset_settings
from polymarket_data.main import app
from polymarket_data.providers import PolymarketEndpoints
from polymarket_data.services import PolymarketDataService, UserDataAggregator


USER_ID = "0x235a480a9ccb7ada0ad2dc11dac3a11fb433febd"
TTL_SECONDS = 300


# =============================================================================
# CANNED PAYLOADS
# =============================================================================


def as_json(body: Any) -> bytes:
    return json.dumps(body).encode("utf-8")


def position_wire(**overrides: Any) -> dict[str, Any]:
    """One position object as the data API sends it (camelCase)."""
    body = {
        "proxyWallet": USER_ID,
        "asset": "2174263314346390629",
        "conditionId": "0xdd22472e552920b8",
        "size": 1520.5,
        "avgPrice": 0.41,
        "initialValue": 623.405,
        "currentValue": 714.635,
        "cashPnl": 91.23,
        "percentPnl": 14.634,
        "totalBought": 1520.5,
        "realizedPnl": 0.0,
        "percentRealizedPnl": 0.0,
        "curPrice": 0.47,
        "redeemable": False,
        "mergeable": False,
        "title": "Will the Fed cut rates in June?",
        "slug": "will-the-fed-cut-rates-in-june",
        "icon": "https://example.com/fed.png",
        "eventSlug": "fed-decision-in-june",
        "outcome": "Yes",
        "outcomeIndex": 0,
        "oppositeOutcome": "No",
        "oppositeAsset": "4833104333661288389",
        "endDate": "2025-06-18",
        "negativeRisk": False,
    }
    body.update(overrides)
    return body


PORTFOLIO_PAYLOAD = as_json([{"user": USER_ID, "value": 1209.4328514150002}])

PNL_PAYLOAD = as_json([
    {"t": 1745971200, "p": 317.79596},
    {"t": 1745974800, "p": "318.5"},
    {"t": 1745978400, "p": 320.25},
])

POSITIONS_PAYLOAD = as_json([
    position_wire(),
    position_wire(title="Will Bitcoin reach $120k in 2025?", outcome="No", outcomeIndex=1),
])

SEARCH_PAYLOAD = as_json({
    "events": [
        {
            "id": "16085",
            "title": "Fed decision in June?",
            "slug": "fed-decision-in-june",
            "imageUrl": "https://example.com/fed.png",
            "volume": 48210933.12,
        },
    ],
    "hasMore": True,
})


# =============================================================================
# FAKES
# =============================================================================


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self._now = start

    def __call__(self) -> float:
        return self._now

    def advance(self, seconds: float) -> None:
        self._now += seconds


Response = Union[bytes, Exception, Callable[[str], bytes]]


class RecordingFetcher:
    """
    Fake raw fetcher routing on the URL path suffix.

    A route maps to bytes (returned), an exception (raised) or a callable
    taking the URL. Every call is recorded, thread-safely.
    """

    def __init__(self, routes: dict[str, Response]):
        self.routes = dict(routes)
        self.calls: list[str] = []
        self._lock = threading.Lock()

    def get(self, url: str) -> bytes:
        with self._lock:
            self.calls.append(url)
        path = httpx.URL(url).path
        for suffix, response in self.routes.items():
            if path.endswith(suffix):
                if isinstance(response, Exception):
                    raise response
                if callable(response):
                    return response(url)
                return response
        raise AssertionError(f"Unexpected fetch: {url}")

    def calls_to(self, suffix: str) -> list[str]:
        with self._lock:
            return [u for u in self.calls if httpx.URL(u).path.endswith(suffix)]


def default_routes() -> dict[str, Response]:
    return {
        "/value": PORTFOLIO_PAYLOAD,
        "/user-pnl": PNL_PAYLOAD,
        "/positions": POSITIONS_PAYLOAD,
        "/events/search": SEARCH_PAYLOAD,
    }


# =============================================================================
# CACHE FIXTURES
# =============================================================================


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def keyed_cache(clock) -> KeyedCache:
    """Provide an isolated KeyedCache on the fake clock."""
    return KeyedCache(ttl_seconds=TTL_SECONDS, clock=clock)


@pytest.fixture
def cached_fetcher(keyed_cache) -> CachedFetcher:
    return CachedFetcher(keyed_cache)


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def fetcher() -> RecordingFetcher:
    """Provide a recording fetcher answering every endpoint successfully."""
    return RecordingFetcher(default_routes())


@pytest.fixture
def data_service(fetcher, cached_fetcher) -> PolymarketDataService:
    """Provide PolymarketDataService over the recording fetcher."""
    return PolymarketDataService(
        fetcher=fetcher,
        cached_fetcher=cached_fetcher,
        endpoints=PolymarketEndpoints(),
    )


@pytest.fixture
def aggregator(data_service) -> UserDataAggregator:
    return UserDataAggregator(data_service=data_service)


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def test_context(fetcher, keyed_cache) -> AppContext:
    """AppContext sharing the test fetcher and cache."""
    reset_settings()
    return AppContext(
        settings=Settings(cache_ttl_seconds=TTL_SECONDS),
        fetcher=fetcher,
        cache=keyed_cache,
    )


@pytest.fixture
def client(test_context) -> TestClient:
    """Provide FastAPI test client bound to the test context."""
    app.dependency_overrides[get_context] = lambda: test_context
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
