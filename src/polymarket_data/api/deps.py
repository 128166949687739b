"""Dependency injection for FastAPI."""

from fastapi import Depends

from polymarket_data.app_context import AppContext, get_app_context
from polymarket_data.services import PolymarketDataService, UserDataAggregator


def get_context() -> AppContext:
    """Provide the AppContext owning the shared response cache."""
    return get_app_context()


def get_data_service(context: AppContext = Depends(get_context)) -> PolymarketDataService:
    """Provide PolymarketDataService instance."""
    return context.data


def get_aggregator(context: AppContext = Depends(get_context)) -> UserDataAggregator:
    """Provide UserDataAggregator instance."""
    return context.aggregator
