"""Domain models package."""

from polymarket_data.domain.models.enums import (
    PnLFidelity,
    PnLInterval,
    PnLRange,
    SortDirection,
)
from polymarket_data.domain.models.cache import CacheEntry
from polymarket_data.domain.models.pnl import PnLDataPoint
from polymarket_data.domain.models.position import Position
from polymarket_data.domain.models.event import Event, SearchResult
from polymarket_data.domain.models.queries import PositionsQuery, AggregateOptions

__all__ = [
    "PnLFidelity",
    "PnLInterval",
    "PnLRange",
    "SortDirection",
    "CacheEntry",
    "PnLDataPoint",
    "Position",
    "Event",
    "SearchResult",
    "PositionsQuery",
    "AggregateOptions",
]
