"""Application settings and configuration."""

from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_name: str = "Polymarket Data Service"
    app_version: str = "0.1.0"

    log_level: str = "INFO"

    # Response cache
    cache_ttl_seconds: float = 300

    # Remote endpoints
    data_api_base_url: str = "https://data-api.polymarket.com"
    pnl_api_base_url: str = "https://user-pnl-api.polymarket.com"
    search_api_base_url: str = "https://polymarket.com/api"
    http_timeout_seconds: float = 10.0

    # Overall deadline for the user summary fan-out (None waits for every branch)
    aggregate_timeout_seconds: Optional[float] = None

    # "stub" serves canned payloads for offline operation
    data_provider: Literal["http", "stub"] = "http"


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
