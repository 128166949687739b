"""
Typed decoding of API payloads.

Each decoder takes the raw response bytes and returns domain values or raises
DecodeError. Wire objects may use camelCase or snake_case field names.
"""

import json
import logging
import math
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from polymarket_data.core.exceptions import DecodeError
from polymarket_data.core.timezone import from_unix_seconds
from polymarket_data.domain.models import Event, PnLDataPoint, Position, SearchResult

logger = logging.getLogger(__name__)


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class _PortfolioValueWire(_WireModel):
    user: Optional[str] = None
    value: float


class _PositionWire(_WireModel):
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


class _EventWire(_WireModel):
    id: str
    title: str
    slug: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    end_date: Optional[str] = None
    volume: Optional[float] = None
    liquidity: Optional[float] = None


class _SearchWire(_WireModel):
    events: list[_EventWire]
    has_more: bool


_portfolio_adapter = TypeAdapter(list[_PortfolioValueWire])
_positions_adapter = TypeAdapter(list[_PositionWire])


def decode_portfolio_value(payload: bytes) -> float:
    """Decode ``[{"user": ..., "value": <number>}]`` into the first value."""
    try:
        rows = _portfolio_adapter.validate_json(payload)
    except ValidationError as e:
        raise DecodeError(f"Malformed portfolio payload: {e}") from e
    if not rows:
        raise DecodeError("Portfolio payload contains no rows")
    return rows[0].value


def decode_positions(payload: bytes) -> list[Position]:
    """Decode a JSON list of position objects."""
    try:
        rows = _positions_adapter.validate_json(payload)
    except ValidationError as e:
        raise DecodeError(f"Malformed positions payload: {e}") from e
    return [Position(**row.model_dump()) for row in rows]


def decode_search_result(payload: bytes) -> SearchResult:
    """Decode an event search page."""
    try:
        wire = _SearchWire.model_validate_json(payload)
    except ValidationError as e:
        raise DecodeError(f"Malformed search payload: {e}") from e
    return SearchResult(
        events=[Event(**event.model_dump()) for event in wire.events],
        has_more=wire.has_more,
    )


def decode_pnl_series(payload: bytes) -> list[PnLDataPoint]:
    """
    Decode a PnL series, dropping points that cannot be read.

    Raises DecodeError only when the payload is not JSON or is not a list.
    """
    try:
        raw = json.loads(payload)
    except ValueError as e:
        raise DecodeError(f"PnL payload is not valid JSON: {e}") from e
    if not isinstance(raw, list):
        raise DecodeError(f"PnL payload must be a list, got {type(raw).__name__}")

    points = []
    for item in raw:
        point = decode_pnl_point(item)
        if point is None:
            logger.debug("Dropping malformed PnL point: %r", item)
            continue
        points.append(point)
    return points


def decode_pnl_point(item: Any) -> Optional[PnLDataPoint]:
    """
    Decode one ``{"t": <unix seconds>, "p": <number or numeric string>}`` point.

    Returns None when the timestamp is missing or not an integer, or the price
    does not parse to a finite float. Price strings must carry no padding and
    no digit separators.
    """
    if not isinstance(item, dict):
        return None

    t = item.get("t")
    if isinstance(t, float) and t.is_integer():
        t = int(t)
    if isinstance(t, bool) or not isinstance(t, int):
        return None

    price = _parse_price(item.get("p"))
    if price is None:
        return None

    try:
        timestamp = from_unix_seconds(t)
    except (OverflowError, OSError, ValueError):
        return None
    return PnLDataPoint(t=timestamp, p=price)


def _parse_price(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        # Only plain numeric strings: no padding, no digit separators
        if not value or value != value.strip() or "_" in value:
            return None
    elif not isinstance(value, (int, float)):
        return None
    try:
        price = float(value)
    except (OverflowError, ValueError):
        return None
    return price if math.isfinite(price) else None
