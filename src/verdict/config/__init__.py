"""Configuration management using pydantic-settings."""

from .settings import (
    LoggingSettings,
    RenderSettings,
    VerdictSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "LoggingSettings",
    "RenderSettings",
    "VerdictSettings",
    "clear_settings_cache",
    "get_settings",
]
