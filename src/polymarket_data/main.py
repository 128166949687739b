"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from polymarket_data.api.routers import cache_router, events_router, users_router
from polymarket_data.app_context import get_app_context
from polymarket_data.config.logging_config import setup_logging
from polymarket_data.config.settings import get_settings
from polymarket_data.core.exceptions import AppError

# Upstream failures are reported as a bad gateway, caller mistakes as 400
_ERROR_STATUS: dict[str, int] = {
    "INVALID_REQUEST": 400,
    "NETWORK_ERROR": 502,
    "DECODE_ERROR": 502,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    setup_logging()
    yield
    # Shutdown
    get_app_context().close()


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Cached Polymarket portfolio, PnL and positions data",
    version=settings.app_version,
    lifespan=lifespan,
)

# Include routers
app.include_router(users_router)
app.include_router(events_router)
app.include_router(cache_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    return JSONResponse(
        status_code=_ERROR_STATUS.get(exc.code, 400),
        content={"error": exc.code, "message": exc.message},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
