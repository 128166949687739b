"""Profit-and-loss series models."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PnLDataPoint:
    """Single point of a PnL series."""

    t: datetime
    p: float
