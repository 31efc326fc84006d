"""Logging setup for the verdict.* loggers.

Modules log through the standard library (logging.getLogger("verdict.errors"),
"verdict.aggregate") and attach structured fields as extra={"context": {...}}.
configure_logging() installs a single handler on the "verdict" logger that
renders those fields either for humans or as JSON lines.

Quick Start:
    >>> from verdict.observability import configure_logging
    >>> configure_logging(format="console", level="DEBUG")
    >>> # 10:30:45.123 [debug] error created class=Repo condition=NOT_FOUND method=load
"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING, TextIO

import orjson

if TYPE_CHECKING:
    from verdict.config import VerdictSettings

ROOT_LOGGER = "verdict"

# Marks the handler installed by configure_logging so reconfiguring replaces it
_HANDLER_ATTR = "_verdict_handler"


def _context(record: logging.LogRecord) -> dict[str, object]:
    ctx = getattr(record, "context", None)
    return ctx if isinstance(ctx, dict) else {}


class ConsoleFormatter(logging.Formatter):
    """Human-readable lines. Format: HH:MM:SS.mmm [level] event key=value ..."""

    def __init__(self, *, show_timestamp: bool = True) -> None:
        super().__init__()
        self.show_timestamp = show_timestamp

    def format(self, record: logging.LogRecord) -> str:
        parts = [datetime.fromtimestamp(record.created, tz=UTC).strftime("%H:%M:%S.%f")[:-3]] if self.show_timestamp else []
        parts += [f"[{record.levelname.lower()}]", record.getMessage()]
        parts += [f"{k}={v}" for k, v in sorted(_context(record).items())]
        line = " ".join(parts)
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class JsonFormatter(logging.Formatter):
    """JSON Lines output for log aggregation."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "event": record.getMessage(),
            **_context(record),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return orjson.dumps(payload, default=str, option=orjson.OPT_NON_STR_KEYS).decode()


def configure_logging(
    format: str = "console",  # noqa: A002 - shadows builtin but matches stdlib
    level: str = "INFO",
    *,
    output: TextIO | None = None,
) -> logging.Handler:
    """Configure the "verdict" logger. Format: "console" (human), "json" (machine), "none"."""
    log = logging.getLogger(ROOT_LOGGER)
    for existing in [h for h in log.handlers if getattr(h, _HANDLER_ATTR, False)]:
        log.removeHandler(existing)

    match format:
        case "console":
            handler: logging.Handler = logging.StreamHandler(output or sys.stderr)
            handler.setFormatter(ConsoleFormatter())
        case "json":
            handler = logging.StreamHandler(output or sys.stdout)
            handler.setFormatter(JsonFormatter())
        case "none":
            handler = logging.NullHandler()
        case _:
            raise ValueError(f"Unknown format: {format}. Use 'console', 'json', or 'none'")

    setattr(handler, _HANDLER_ATTR, True)
    log.addHandler(handler)
    log.setLevel(getattr(logging, level.upper(), logging.INFO))
    log.propagate = False
    return handler


def configure_from_settings(settings: VerdictSettings | None = None) -> logging.Handler:
    """Apply LoggingSettings (defaults to the cached global settings).

    Loading the global settings here validates the whole VERDICT_* environment,
    so a malformed variable raises pydantic.ValidationError at startup instead
    of on the first failed outcome.
    """
    if settings is None:
        from verdict.config import get_settings
        settings = get_settings()
    return configure_logging(settings.logging.format, settings.effective_log_level)
