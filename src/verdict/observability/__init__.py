"""Logging configuration for verdict's loggers."""

from .logger import ConsoleFormatter, JsonFormatter, configure_from_settings, configure_logging

__all__ = ["ConsoleFormatter", "JsonFormatter", "configure_from_settings", "configure_logging"]
