"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- GOOGLE_GEO_BASE_URL=http://localhost:8080/geocode
- GOOGLE_GEO_API_KEY=...
- GOOGLE_GEO_CLIENT_ID=gme-example / GOOGLE_GEO_SECRET_KEY=...
- GOOGLE_GEO_LOG_LEVEL=DEBUG
- etc.

The endpoint lives on each client instance built from this
configuration; there is no process-wide endpoint variable.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://maps.googleapis.com/maps/api/geocode/json"
DEFAULT_SIGNING_PATH = "/maps/api/geocode/json"


class GeocodingConfig(BaseSettings):
    """Geocoding service configuration.

    Environment variables prefixed with GOOGLE_GEO_.
    """

    model_config = SettingsConfigDict(env_prefix="GOOGLE_GEO_")

    base_url: str = DEFAULT_BASE_URL
    signing_path: str = DEFAULT_SIGNING_PATH
    language: str = "ja"
    sensor_flag: bool = False
    # None keeps the HTTP client's own default (no timeout)
    timeout_seconds: Optional[float] = None

    api_key: str = ""
    client_id: str = ""
    secret_key: str = Field(default="", repr=False)

    @field_validator("base_url")
    @classmethod
    def _base_url_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("base_url must not be empty")
        return value


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with GOOGLE_GEO_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="GOOGLE_GEO_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs.

        config = get_config()
        print(config.geocoding.base_url)
    """

    model_config = SettingsConfigDict(env_prefix="GOOGLE_GEO_APP_")

    geocoding: GeocodingConfig = Field(default_factory=GeocodingConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
