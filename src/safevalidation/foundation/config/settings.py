"""Environment-based configuration using pydantic-settings.

Provides type-safe, validated configuration from environment variables
with sensible defaults. Supports .env files and nested configuration.

Example:
    >>> from safevalidation.foundation.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.capture.format)
    message
    >>> print(settings.logging.level)
    WARNING

    # Or with environment variables:
    # SAFEVALIDATION_CAPTURE_FORMAT=qualified
    # SAFEVALIDATION_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CaptureSettings(BaseSettings):
    """How from_fallible renders a caught exception when no projection is given."""

    model_config = SettingsConfigDict(
        env_prefix="SAFEVALIDATION_CAPTURE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    format: Literal["message", "qualified", "repr"] = Field(
        default="message",
        description="message: str(exc); qualified: 'Type: message'; repr: repr(exc)",
    )

    @field_validator("format", mode="before")
    @classmethod
    def _normalize_format(cls, v: str) -> str:
        return v.lower() if isinstance(v, str) else v


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SAFEVALIDATION_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_captures: bool = Field(default=True, description="Log exceptions absorbed by from_fallible")

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class SafeValidationSettings(BaseSettings):
    """Root settings for safevalidation.

    Loads configuration from environment variables with SAFEVALIDATION_ prefix.
    Supports nested configuration and .env files.

    Example environment variables:
        SAFEVALIDATION_DEBUG=true
        SAFEVALIDATION_CAPTURE_FORMAT=repr
        SAFEVALIDATION_LOG_LEVEL=DEBUG
        SAFEVALIDATION_LOG_LOG_CAPTURES=false
    """

    model_config = SettingsConfigDict(
        env_prefix="SAFEVALIDATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    # Nested settings (loaded with SAFEVALIDATION_CAPTURE_, SAFEVALIDATION_LOG_)
    capture: CaptureSettings = Field(default_factory=CaptureSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @computed_field
    @property
    def effective_log_level(self) -> str:
        """Debug mode forces DEBUG regardless of the configured level."""
        return "DEBUG" if self.debug else self.logging.level


# Singleton pattern for settings
@lru_cache(maxsize=1)
def get_settings() -> SafeValidationSettings:
    """Get the global settings instance (cached).

    Example:
        >>> settings = get_settings()
        >>> settings.debug
        False
    """
    return SafeValidationSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
