"""Open position held by a user in a market outcome."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from polymarket_data.core.timezone import parse_datetime_utc


@dataclass(frozen=True)
class Position:
    """Position record as reported by the data API."""

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

    @property
    def end_datetime(self) -> Optional[datetime]:
        """Market end date in UTC, or None when the API sent something unparsable."""
        return parse_datetime_utc(self.end_date)
