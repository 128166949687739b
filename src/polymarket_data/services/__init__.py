"""Service layer - fetch orchestration."""

from polymarket_data.services.data_service import PolymarketDataService
from polymarket_data.services.aggregator import UserDataAggregator

__all__ = [
    "PolymarketDataService",
    "UserDataAggregator",
]
