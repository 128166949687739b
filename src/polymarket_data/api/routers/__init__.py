"""API routers package."""

from polymarket_data.api.routers.users import router as users_router
from polymarket_data.api.routers.events import router as events_router
from polymarket_data.api.routers.cache import router as cache_router

__all__ = [
    "users_router",
    "events_router",
    "cache_router",
]
