"""Configuration management using pydantic-settings."""

from .settings import LoggingSettings, ResultkitSettings, clear_settings_cache, get_settings

__all__ = [
    "LoggingSettings",
    "ResultkitSettings",
    "clear_settings_cache",
    "get_settings",
]
