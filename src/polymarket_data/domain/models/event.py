"""Event search models."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Event:
    """Market event returned by the search endpoint."""

    id: str
    title: str
    slug: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    end_date: Optional[str] = None
    volume: Optional[float] = None
    liquidity: Optional[float] = None


@dataclass(frozen=True)
class SearchResult:
    """One page of event search results."""

    events: list[Event] = field(default_factory=list)
    has_more: bool = False
