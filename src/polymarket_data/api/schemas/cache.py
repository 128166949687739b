"""Pydantic schemas for cache management."""

from pydantic import BaseModel


class CacheInvalidateResponse(BaseModel):
    status: str = "invalidated"


class CacheStatsResponse(BaseModel):
    """Response schema for cache counters."""

    hits: int
    misses: int
    entries: int
    ttl_seconds: float
