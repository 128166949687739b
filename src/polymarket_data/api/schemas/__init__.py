"""Pydantic schemas for API request/response."""

from polymarket_data.api.schemas.user_data import (
    PortfolioResponse,
    PnLPointResponse,
    PnLResponse,
    PositionResponse,
    PositionsResponse,
    UserSummaryResponse,
)
from polymarket_data.api.schemas.events import EventResponse, SearchResponse
from polymarket_data.api.schemas.cache import CacheInvalidateResponse, CacheStatsResponse

__all__ = [
    "PortfolioResponse",
    "PnLPointResponse",
    "PnLResponse",
    "PositionResponse",
    "PositionsResponse",
    "UserSummaryResponse",
    "EventResponse",
    "SearchResponse",
    "CacheInvalidateResponse",
    "CacheStatsResponse",
]
