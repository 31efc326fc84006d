"""Tests for logging configuration and formatters."""

import io
import logging

import orjson
import pytest

from verdict.aggregate import combine
from verdict.config import LoggingSettings, VerdictSettings
from verdict.errors import NOT_FOUND, Error
from verdict.observability import ConsoleFormatter, JsonFormatter, configure_from_settings, configure_logging
from verdict.outcome import Fail, Ok


class Gateway:
    pass


def _verdict_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger("verdict").handlers if getattr(h, "_verdict_handler", False)]


def test_console_output() -> None:
    out = io.StringIO()
    configure_logging("console", "DEBUG", output=out)

    Error.create(Gateway(), NOT_FOUND, None, "call")

    line = out.getvalue().strip()
    assert "[debug] error created" in line
    assert "class=Gateway" in line
    assert "condition=NOT_FOUND" in line
    assert "method=call" in line


def test_json_output() -> None:
    out = io.StringIO()
    configure_logging("json", "DEBUG", output=out)

    combine(Gateway(), [Ok(), Fail(Gateway(), NOT_FOUND)])

    entries = [orjson.loads(line) for line in out.getvalue().splitlines()]
    short = next(e for e in entries if e["event"] == "combine short-circuited")
    assert short["logger"] == "verdict.aggregate"
    assert short["level"] == "debug"
    assert short["index"] == 1
    assert short["condition"] == "NOT_FOUND"
    assert "timestamp" in short


def test_level_filters_debug() -> None:
    out = io.StringIO()
    configure_logging("console", "INFO", output=out)

    Error.create(Gateway(), NOT_FOUND)

    assert out.getvalue() == ""


def test_none_format_installs_null_handler() -> None:
    assert isinstance(configure_logging("none"), logging.NullHandler)


def test_unknown_format() -> None:
    with pytest.raises(ValueError, match="Unknown format"):
        configure_logging("xml")


def test_reconfigure_replaces_handler() -> None:
    configure_logging("console", output=io.StringIO())
    configure_logging("json", output=io.StringIO())

    handlers = _verdict_handlers()
    assert len(handlers) == 1
    assert isinstance(handlers[0].formatter, JsonFormatter)


def test_configure_from_settings() -> None:
    settings = VerdictSettings(logging=LoggingSettings(format="json", level="WARNING"))
    handler = configure_from_settings(settings)

    assert isinstance(handler.formatter, JsonFormatter)
    assert logging.getLogger("verdict").level == logging.WARNING


def test_console_formatter_without_timestamp() -> None:
    record = logging.LogRecord("verdict.test", logging.INFO, __file__, 1, "hello", None, None)
    record.context = {"b": 2, "a": 1}

    assert ConsoleFormatter(show_timestamp=False).format(record) == "[info] hello a=1 b=2"
