"""Response cache management endpoints."""

from fastapi import APIRouter, Depends

from polymarket_data.api.deps import get_context
from polymarket_data.api.schemas import CacheInvalidateResponse, CacheStatsResponse
from polymarket_data.app_context import AppContext

router = APIRouter(prefix="/cache", tags=["cache"])


@router.post("/invalidate", response_model=CacheInvalidateResponse)
def invalidate_cache(context: AppContext = Depends(get_context)) -> CacheInvalidateResponse:
    """Drop every cached response."""
    context.data.invalidate_cache()
    return CacheInvalidateResponse()


@router.get("/stats", response_model=CacheStatsResponse)
def cache_stats(context: AppContext = Depends(get_context)) -> CacheStatsResponse:
    """Get cache hit/miss counters."""
    stats = context.data.cache_stats()
    return CacheStatsResponse(
        hits=stats.hits,
        misses=stats.misses,
        entries=stats.entries,
        ttl_seconds=context.cache.ttl_seconds,
    )
