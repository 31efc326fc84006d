"""Tests for @tracked method capture and sender naming."""

import asyncio

import pytest

from verdict.callsite import current_method, resolve_method, sender_name, tracked


class Worker:
    @tracked
    def outer(self) -> tuple[str, str, str]:
        before = current_method()
        inner = self.inner()
        after = current_method()
        return before, inner, after

    @tracked
    def inner(self) -> str:
        return current_method()

    @tracked
    def explode(self) -> None:
        raise RuntimeError("boom")

    @tracked
    async def fetch(self) -> str:
        await asyncio.sleep(0)
        return current_method()


def test_untracked_is_empty() -> None:
    assert current_method() == ""


def test_tracked_nesting_restores_outer_name() -> None:
    assert Worker().outer() == ("outer", "inner", "outer")
    assert current_method() == ""


def test_tracked_resets_on_exception() -> None:
    with pytest.raises(RuntimeError):
        Worker().explode()
    assert current_method() == ""


def test_tracked_async() -> None:
    assert asyncio.run(Worker().fetch()) == "fetch"


def test_tracked_preserves_metadata() -> None:
    assert Worker.outer.__name__ == "outer"


def test_resolve_method_prefers_explicit() -> None:
    assert resolve_method("explicit") == "explicit"
    assert resolve_method(None) == ""


def test_resolve_method_explicit_empty_wins() -> None:
    @tracked
    def run() -> str:
        return resolve_method("")

    assert run() == ""


def test_sender_name() -> None:
    assert sender_name(Worker()) == "Worker"
    assert sender_name(Worker) == "Worker"
    assert sender_name(42) == "int"
