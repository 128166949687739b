"""User data endpoints."""

from dataclasses import asdict
from typing import Optional

from fastapi import APIRouter, Depends, Query

from polymarket_data.api.deps import get_aggregator, get_data_service
from polymarket_data.api.schemas import (
    PnLPointResponse,
    PnLResponse,
    PortfolioResponse,
    PositionResponse,
    PositionsResponse,
    UserSummaryResponse,
)
from polymarket_data.domain.models import (
    AggregateOptions,
    PnLDataPoint,
    PnLFidelity,
    PnLInterval,
    Position,
    PositionsQuery,
    SortDirection,
)
from polymarket_data.services import PolymarketDataService, UserDataAggregator

router = APIRouter(prefix="/users", tags=["users"])


def _point_response(point: PnLDataPoint) -> PnLPointResponse:
    return PnLPointResponse(t=point.t, p=point.p)


def _position_response(position: Position) -> PositionResponse:
    return PositionResponse(**asdict(position))


@router.get("/{user_id}/portfolio", response_model=PortfolioResponse)
def get_portfolio(
    user_id: str,
    data: PolymarketDataService = Depends(get_data_service),
) -> PortfolioResponse:
    """Get the user's total portfolio value."""
    return PortfolioResponse(user_id=user_id, value=data.fetch_portfolio(user_id))


@router.get("/{user_id}/pnl", response_model=PnLResponse)
def get_pnl(
    user_id: str,
    interval: PnLInterval = Query(PnLInterval.DAY),
    fidelity: Optional[PnLFidelity] = Query(None, description="Defaults per interval"),
    data: PolymarketDataService = Depends(get_data_service),
) -> PnLResponse:
    """Get the user's PnL series."""
    points = data.fetch_pnl(user_id, interval=interval, fidelity=fidelity)

    return PnLResponse(
        user_id=user_id,
        interval=interval,
        fidelity=fidelity or interval.default_fidelity,
        points=[_point_response(p) for p in points],
    )


@router.get("/{user_id}/positions", response_model=PositionsResponse)
def get_positions(
    user_id: str,
    size_threshold: float = Query(0.1),
    limit: int = Query(50),
    offset: int = Query(0),
    sort_by: str = Query("CURRENT"),
    sort_direction: SortDirection = Query(SortDirection.DESC),
    data: PolymarketDataService = Depends(get_data_service),
) -> PositionsResponse:
    """Get the user's open positions."""
    query = PositionsQuery(
        size_threshold=size_threshold,
        limit=limit,
        offset=offset,
        sort_by=sort_by,
        sort_direction=sort_direction,
    )
    positions = data.fetch_positions(user_id, query)

    return PositionsResponse(
        user_id=user_id,
        positions=[_position_response(p) for p in positions],
    )


@router.get("/{user_id}/summary", response_model=UserSummaryResponse)
def get_summary(
    user_id: str,
    pnl_interval: PnLInterval = Query(PnLInterval.DAY),
    pnl_fidelity: Optional[PnLFidelity] = Query(None),
    aggregator: UserDataAggregator = Depends(get_aggregator),
) -> UserSummaryResponse:
    """
    Get portfolio value, PnL and positions in one call.

    Always succeeds; branches that could not be fetched are null.
    """
    user_data = aggregator.aggregate(
        user_id,
        AggregateOptions(pnl_interval=pnl_interval, pnl_fidelity=pnl_fidelity),
    )

    return UserSummaryResponse(
        user_id=user_id,
        portfolio_value=user_data.portfolio_value,
        pnl=(
            [_point_response(p) for p in user_data.pnl]
            if user_data.pnl is not None
            else None
        ),
        positions=(
            [_position_response(p) for p in user_data.positions]
            if user_data.positions is not None
            else None
        ),
    )
