"""Configuration management using pydantic-settings."""

from .settings import (
    AttemptSettings,
    LoggingSettings,
    ReportSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "AttemptSettings",
    "LoggingSettings",
    "ReportSettings",
    "clear_settings_cache",
    "get_settings",
]
