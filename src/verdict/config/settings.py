"""Environment-based configuration using pydantic-settings.

Example:
    >>> from verdict.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.level
    'INFO'
    >>> settings.render.include_fault
    True

    # Or with environment variables:
    # VERDICT_LOG_LEVEL=DEBUG
    # VERDICT_LOG_LOG_FAILURES=true
    # VERDICT_RENDER_INCLUDE_DATA=false
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="VERDICT_LOG_",
        extra="ignore",
    )

    level: LogLevel = "INFO"
    format: Literal["console", "json", "none"] = "console"
    log_failures: bool = Field(default=False, description="Log every newly created Error")
    failure_level: LogLevel = Field(default="WARNING", description="Level used when log_failures is on")

    @field_validator("level", "failure_level", mode="before")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class RenderSettings(BaseSettings):
    """Controls the textual form of errors."""

    model_config = SettingsConfigDict(
        env_prefix="VERDICT_RENDER_",
        extra="ignore",
    )

    include_fault: bool = Field(default=True, description="Append the underlying exception")
    include_data: bool = Field(default=True, description="Append additional_data annotations")


class VerdictSettings(BaseSettings):
    """Root settings for verdict.

    Loads configuration from environment variables with the VERDICT_ prefix
    and from a .env file in the working directory.

    Example environment variables:
        VERDICT_DEBUG=true
        VERDICT_LOG_FORMAT=json
        VERDICT_RENDER_INCLUDE_FAULT=false
    """

    model_config = SettingsConfigDict(
        env_prefix="VERDICT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    render: RenderSettings = Field(default_factory=RenderSettings)

    @computed_field
    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug mode is on, else the configured level."""
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> VerdictSettings:
    """Get the global settings instance (cached).

    Raises pydantic.ValidationError on malformed VERDICT_* variables. A failed
    load is not cached, so every later call (including the ones made by
    Error.create and Error.render) raises again until the environment is fixed.
    """
    return VerdictSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()
