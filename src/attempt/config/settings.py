"""Environment-based configuration using pydantic-settings.

Example:
    >>> from attempt.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.failure_level
    'DEBUG'

    # Or with environment variables:
    # ATTEMPT_LOG_LOG_FAILURES=false
    # ATTEMPT_REPORT_MAX_VALUE_LENGTH=80
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """How executors log the exceptions they capture."""

    model_config = SettingsConfigDict(
        env_prefix="ATTEMPT_LOG_",
        extra="ignore",
    )

    log_failures: bool = Field(default=True, description="Log exceptions captured into failed results")
    failure_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "DEBUG"


class ReportSettings(BaseSettings):
    """Defaults for OutcomeReport/ErrorInfo snapshots."""

    model_config = SettingsConfigDict(
        env_prefix="ATTEMPT_REPORT_",
        extra="ignore",
    )

    include_traceback: bool = True
    max_value_length: PositiveInt = Field(default=200, description="Truncate value repr beyond this length")


class AttemptSettings(BaseSettings):
    """Root settings, loaded from ATTEMPT_* environment variables and .env."""

    model_config = SettingsConfigDict(
        env_prefix="ATTEMPT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    report: ReportSettings = Field(default_factory=ReportSettings)


@lru_cache(maxsize=1)
def get_settings() -> AttemptSettings:
    """Get the global settings instance (cached)."""
    return AttemptSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()
