"""
Application Configuration
=========================
Centralized configuration management using Pydantic Settings.
"""

from decimal import Decimal
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_env: Literal["development", "staging", "production"] = "development"
    app_debug: bool = False
    app_host: str = "0.0.0.0"
    app_port: int = 8000

    # Token checkout
    max_custom_amount: Decimal = Field(default=Decimal("10000"), gt=0)

    # Email delivery (Resend)
    resend_api_key: str | None = None
    resend_api_url: str = "https://api.resend.com"
    contact_from_address: str = "Chaletcoaching Contact Form <info@chaletcoaching.co.uk>"
    contact_to_address: str = "info@chaletcoaching.co.uk"
    http_timeout: float = 10.0

    # Contact form rate limiting
    contact_rate_limit_window_seconds: int = Field(default=600, gt=0)
    contact_rate_limit_max_requests: int = Field(default=5, ge=1)
    contact_rate_limit_max_keys: int = Field(default=1000, ge=1)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    # Metrics
    metrics_enabled: bool = True

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
