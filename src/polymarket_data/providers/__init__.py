"""Raw fetch providers module."""

from polymarket_data.providers.raw_fetcher import RawFetcher
from polymarket_data.providers.http_fetcher import HttpxFetcher
from polymarket_data.providers.stub_provider import StubFetcher
from polymarket_data.providers.endpoints import PolymarketEndpoints

__all__ = [
    "RawFetcher",
    "HttpxFetcher",
    "StubFetcher",
    "PolymarketEndpoints",
]
