"""Pydantic schemas for user data endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from polymarket_data.domain.models import PnLFidelity, PnLInterval


class PortfolioResponse(BaseModel):
    """Response schema for a portfolio value."""

    user_id: str
    value: float


class PnLPointResponse(BaseModel):
    """Response schema for a single PnL point."""

    t: datetime
    p: float


class PnLResponse(BaseModel):
    """Response schema for a PnL series."""

    user_id: str
    interval: PnLInterval
    fidelity: PnLFidelity
    points: list[PnLPointResponse]


class PositionResponse(BaseModel):
    """Response schema for a single position."""

    proxy_wallet: str
    asset: str
    condition_id: str
    size: float
    avg_price: float
    initial_value: float
    current_value: float
    cash_pnl: float
    percent_pnl: float
    total_bought: float
    realized_pnl: float
    percent_realized_pnl: float
    cur_price: float
    redeemable: bool
    mergeable: bool
    title: str
    slug: str
    icon: str
    event_slug: str
    outcome: str
    outcome_index: int
    opposite_outcome: str
    opposite_asset: str
    end_date: str
    negative_risk: bool


class PositionsResponse(BaseModel):
    """Response schema for positions listing."""

    user_id: str
    positions: list[PositionResponse]


class UserSummaryResponse(BaseModel):
    """
    Response schema for the aggregated user summary.

    Null fields are unavailable, not zero.
    """

    user_id: str
    portfolio_value: Optional[float] = None
    pnl: Optional[list[PnLPointResponse]] = None
    positions: Optional[list[PositionResponse]] = None
