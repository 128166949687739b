"""Request parameter models with their documented defaults."""

from dataclasses import dataclass, field
from typing import Optional

from polymarket_data.domain.models.enums import PnLFidelity, PnLInterval, SortDirection


@dataclass(frozen=True)
class PositionsQuery:
    """Filters, pagination and ordering for a positions listing."""

    size_threshold: float = 0.1
    limit: int = 50
    offset: int = 0
    sort_by: str = "CURRENT"
    sort_direction: SortDirection = SortDirection.DESC


@dataclass(frozen=True)
class AggregateOptions:
    """Options for the user summary fan-out."""

    pnl_interval: PnLInterval = PnLInterval.DAY
    pnl_fidelity: Optional[PnLFidelity] = None
    positions: PositionsQuery = field(default_factory=PositionsQuery)
