"""Enumerations for domain models."""

from enum import Enum


class PnLFidelity(str, Enum):
    """Spacing between points of a PnL series."""

    DAY = "1d"
    EIGHTEEN_HOURS = "18h"
    TWELVE_HOURS = "12h"
    THREE_HOURS = "3h"
    ONE_HOUR = "1h"


class PnLInterval(str, Enum):
    """Time window covered by a PnL series."""

    MAX = "max"
    MONTH = "1m"
    WEEK = "1w"
    DAY = "1d"
    TWELVE_HOURS = "12h"
    SIX_HOURS = "6h"

    @property
    def default_fidelity(self) -> PnLFidelity:
        """Fidelity used when the caller does not ask for one."""
        return _DEFAULT_FIDELITY[self]


_DEFAULT_FIDELITY: dict[PnLInterval, PnLFidelity] = {
    PnLInterval.MAX: PnLFidelity.TWELVE_HOURS,
    PnLInterval.MONTH: PnLFidelity.THREE_HOURS,
    PnLInterval.WEEK: PnLFidelity.THREE_HOURS,
    PnLInterval.DAY: PnLFidelity.ONE_HOUR,
    PnLInterval.TWELVE_HOURS: PnLFidelity.ONE_HOUR,
    PnLInterval.SIX_HOURS: PnLFidelity.ONE_HOUR,
}


class PnLRange(str, Enum):
    """Range choices offered to dashboards; each maps onto an interval."""

    TODAY = "today"
    DAY = "1d"
    WEEK = "1w"
    MONTH = "1m"
    MAX = "max"

    @property
    def interval(self) -> PnLInterval:
        return _RANGE_INTERVAL[self]

    @property
    def label(self) -> str:
        return _RANGE_LABEL[self]


_RANGE_INTERVAL: dict[PnLRange, PnLInterval] = {
    PnLRange.TODAY: PnLInterval.DAY,
    PnLRange.DAY: PnLInterval.DAY,
    PnLRange.WEEK: PnLInterval.WEEK,
    PnLRange.MONTH: PnLInterval.MONTH,
    PnLRange.MAX: PnLInterval.MAX,
}

_RANGE_LABEL: dict[PnLRange, str] = {
    PnLRange.TODAY: "Today",
    PnLRange.DAY: "1D",
    PnLRange.WEEK: "1W",
    PnLRange.MONTH: "1M",
    PnLRange.MAX: "All",
}


class SortDirection(str, Enum):
    """Sort direction for position listings."""

    ASC = "ASC"
    DESC = "DESC"
