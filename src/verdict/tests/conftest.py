"""Shared fixtures: isolate settings and logging configuration per test."""

import logging
import os

import pytest

from verdict.config import clear_settings_cache


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> object:
    """Drop VERDICT_* env vars and the cached settings around each test."""
    for key in [k for k in os.environ if k.startswith("VERDICT_")]:
        monkeypatch.delenv(key)
    monkeypatch.chdir(os.path.dirname(__file__))  # no stray .env
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture(autouse=True)
def reset_logging() -> object:
    """Undo configure_logging() so caplog sees verdict.* records."""
    yield
    log = logging.getLogger("verdict")
    for handler in list(log.handlers):
        log.removeHandler(handler)
    log.setLevel(logging.NOTSET)
    log.propagate = True
