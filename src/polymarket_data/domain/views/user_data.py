"""View model for the aggregated user summary."""

from dataclasses import dataclass
from typing import Optional

from polymarket_data.domain.models import PnLDataPoint, Position


@dataclass(frozen=True)
class UserData:
    """
    Snapshot of the three user data branches.

    A None field means that branch failed; it never means "not fetched yet".
    """

    portfolio_value: Optional[float] = None
    pnl: Optional[list[PnLDataPoint]] = None
    positions: Optional[list[Position]] = None
