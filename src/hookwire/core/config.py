"""Configuration management for Hookwire.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Configuration is loaded once when the
runtime is created and is treated as immutable afterwards; the
``before-config``/``after-config`` hooks get the only chance to adjust it.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings.

    Settings are loaded from environment variables and .env files.
    All configuration values are validated at startup.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="HOOKWIRE_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    app_name: str = "Hookwire"
    app_version: str = "0.1.0"
    environment: Literal["development", "production", "testing"] = "development"
    debug: bool = False

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    # Registry Settings
    registry_mode: Literal["clean", "history"] = Field(
        default="clean",
        description="Retention mode for registries created by the runtime",
    )

    # Hook Settings
    hook_id_prefix: str = Field(
        default="hook",
        description="Prefix for generated hook ids",
    )

    # Server Settings
    request_id_header: str = "X-Request-ID"

    @field_validator("registry_mode", mode="before")
    @classmethod
    def normalize_registry_mode(cls, v: str) -> str:
        """Accept registry modes in any case (CLEAN, History, ...)."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == "testing"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    This function caches the settings instance to avoid reloading
    configuration on every call. Settings are loaded once at startup.

    Returns:
        Settings: Cached application settings instance.
    """
    return Settings()
