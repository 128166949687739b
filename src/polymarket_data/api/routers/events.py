"""Event search endpoints."""

from fastapi import APIRouter, Depends, Query

from polymarket_data.api.deps import get_data_service
from polymarket_data.api.schemas import EventResponse, SearchResponse
from polymarket_data.services import PolymarketDataService

router = APIRouter(prefix="/events", tags=["events"])


@router.get("/search", response_model=SearchResponse)
def search_events(
    q: str = Query(..., description="Free-text query"),
    category: str = Query("all"),
    page: int = Query(1),
    data: PolymarketDataService = Depends(get_data_service),
) -> SearchResponse:
    """Search market events."""
    result = data.search_events(q, category=category, page=page)

    return SearchResponse(
        events=[
            EventResponse(
                id=e.id,
                title=e.title,
                slug=e.slug,
                description=e.description,
                image_url=e.image_url,
                end_date=e.end_date,
                volume=e.volume,
                liquidity=e.liquidity,
            )
            for e in result.events
        ],
        has_more=result.has_more,
    )
