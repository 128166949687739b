"""Pydantic schemas for event search."""

from typing import Optional

from pydantic import BaseModel


class EventResponse(BaseModel):
    """Response schema for a market event."""

    id: str
    title: str
    slug: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    end_date: Optional[str] = None
    volume: Optional[float] = None
    liquidity: Optional[float] = None


class SearchResponse(BaseModel):
    """Response schema for an event search page."""

    events: list[EventResponse]
    has_more: bool
