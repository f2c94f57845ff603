"""Environment-based configuration using pydantic-settings.

Type-safe, validated configuration from environment variables with quiet
defaults: a library should not print anything unless asked to.

Example:
    >>> from resultkit.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.level
    'WARNING'

    # Or with environment variables:
    # RESULTKIT_LOG_LEVEL=DEBUG
    # RESULTKIT_LOG_FORMAT=json
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationInfo, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RESULTKIT_LOG_",
        extra="ignore",
    )

    level: LogLevel = "WARNING"
    format: Literal["console", "json", "none"] = "console"
    colors: bool | None = Field(default=None, description="None = auto-detect from the output stream")

    @field_validator("level", "format", mode="before")
    @classmethod
    def _normalize_case(cls, v: str, info: ValidationInfo) -> str:
        if not isinstance(v, str):
            return v
        return v.upper() if info.field_name == "level" else v.lower()


class ResultkitSettings(BaseSettings):
    """Root settings for resultkit.

    Loads configuration from environment variables with RESULTKIT_ prefix
    and from a .env file.

    Example environment variables:
        RESULTKIT_DEBUG=true
        RESULTKIT_LOG_LEVEL=INFO
        RESULTKIT_LOG_FORMAT=json
    """

    model_config = SettingsConfigDict(
        env_prefix="RESULTKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Force DEBUG logging")
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @computed_field
    @property
    def log_level(self) -> LogLevel:
        """Effective log level: DEBUG when debug is on, else logging.level."""
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> ResultkitSettings:
    """Get the global settings instance (cached)."""
    return ResultkitSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    The next get_settings() call reloads configuration from the environment.
    """
    get_settings.cache_clear()
