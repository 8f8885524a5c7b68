"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

BUNDLED_DATA_FILE = (
    Path(__file__).resolve().parent.parent
    / "infrastructure"
    / "store"
    / "product_transaction.json"
)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables
    or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "sales-dashboard"
    app_version: str = "0.1.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: List[str] = ["*"]

    # Record store
    data_file: Path = BUNDLED_DATA_FILE
    record_timezone: str = Field(
        default="UTC",
        description="IANA zone every dateOfSale is normalized into at load time",
    )

    # Metrics
    metrics_enabled: bool = True

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"


class DashboardSettings(BaseSettings):
    """
    Settings for the dashboard client.

    Environment variables use the DASHBOARD_ prefix:
        DASHBOARD_API_BASE_URL=http://localhost:5000
        DASHBOARD_REQUEST_TIMEOUT=10
    """

    model_config = SettingsConfigDict(
        env_prefix="DASHBOARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_base_url: str = "http://localhost:5000"
    request_timeout: float = 10.0
    record_timezone: str = "UTC"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


@lru_cache
def get_dashboard_settings() -> DashboardSettings:
    """Get cached dashboard settings instance."""
    return DashboardSettings()


settings = get_settings()
