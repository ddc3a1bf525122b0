import logging
from typing import Any

from pydantic import Field, computed_field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration using Pydantic BaseSettings.
    Values are loaded automatically from environment variables and `.env`.
    """

    # API Configuration
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "Printflow Production API"
    PROJECT_DESCRIPTION: str = "Decoration pricing and production workflow for custom apparel orders"
    VERSION: str = "0.1.0"

    # Application Settings
    DEBUG: bool = Field(False, description="Debug mode")
    ENVIRONMENT: str = Field("production", description="Runtime environment")
    LOG_LEVEL: str = Field("INFO", description="Root log level")
    LOG_FORMAT: str = Field("colored", description="Log format: colored, json or plain")
    LOG_FILE: str | None = Field(None, description="Optional JSON log file path")

    # Pricing service (job estimator)
    PRICING_API_URL: str = Field("http://job-estimator:3001", description="Base URL of the remote pricing service")
    PRICING_API_TIMEOUT: float = Field(10.0, description="Timeout for pricing requests in seconds")
    PRICING_DEBOUNCE_MS: int = Field(300, description="Coalescing window for quote sessions (0 disables)")
    FALLBACK_MARGIN_PCT: float = Field(35.0, description="Margin applied by the built-in fallback pricing")
    CURRENCY: str = Field("USD", description="ISO currency code for quoted amounts")

    # Order backend (production dashboard API)
    ORDER_API_URL: str = Field("http://dashboard-api:3335", description="Base URL of the order backend")
    ORDER_API_TIMEOUT: float = Field(15.0, description="Timeout for order backend requests in seconds")

    # Always-authenticated owner. Only meant for local development.
    AUTH_BYPASS_ENABLED: bool = Field(False, description="Treat every request as the configured owner")
    DEV_OWNER_ID: str | None = Field(None, description="Actor id used when AUTH_BYPASS_ENABLED is on")

    # Sentry Configuration
    SENTRY_DSN: str | None = Field(None, description="Sentry DSN for error tracking")

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def __init__(self, **data: Any):
        super().__init__(**data)

    @field_validator("PRICING_API_URL", "ORDER_API_URL")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("PRICING_DEBOUNCE_MS")
    @classmethod
    def validate_debounce(cls, v):
        if v < 0:
            raise ValueError("PRICING_DEBOUNCE_MS must be 0 or greater")
        return v

    @field_validator("FALLBACK_MARGIN_PCT")
    @classmethod
    def validate_margin(cls, v):
        if not 0 <= v <= 100:
            raise ValueError("FALLBACK_MARGIN_PCT must be between 0 and 100")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown LOG_LEVEL: {v}")
        return level

    @field_validator("CURRENCY")
    @classmethod
    def validate_currency(cls, v: str) -> str:
        if len(v) != 3:
            raise ValueError("CURRENCY must be a 3-letter ISO code")
        return v.upper()

    @model_validator(mode="after")
    def validate_auth_bypass(self) -> "Settings":
        if self.AUTH_BYPASS_ENABLED and not self.DEV_OWNER_ID:
            raise ValueError("AUTH_BYPASS_ENABLED requires DEV_OWNER_ID")
        return self

    @computed_field
    @property
    def is_development(self) -> bool:
        """Whether the app runs in a development environment"""
        return self.DEBUG or self.ENVIRONMENT.lower() in ["development", "dev", "local"]

    @computed_field
    @property
    def pricing_debounce_seconds(self) -> float:
        return self.PRICING_DEBOUNCE_MS / 1000


# Settings singleton
_settings_instance = None


def get_settings() -> Settings:
    """
    Return a cached Settings instance.
    Avoids re-reading the environment on every call.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


def reset_settings() -> None:
    """Drop the cached instance (used by tests that tweak the environment)."""
    global _settings_instance
    _settings_instance = None
