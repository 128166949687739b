"""View models for service outputs."""

from polymarket_data.domain.views.user_data import UserData

__all__ = [
    "UserData",
]
