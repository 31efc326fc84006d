"""Aggregation of several outcomes into one.

All three forms succeed only if every outcome succeeded, carrying the last
non-empty success note seen. Otherwise they fail fast: the first failing
outcome is re-stamped with sender's identity and iteration stops, so lazy
iterables are never advanced past it.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable
from typing import Any, TypeVar

from verdict.errors import InvalidSenderError
from verdict.outcome import Fail, Outcome

logger = logging.getLogger("verdict.aggregate")

T = TypeVar("T")


def _check_sender(sender: object, *, reject_collections: bool = False) -> None:
    if isinstance(sender, Outcome) or (
        reject_collections and isinstance(sender, Collection) and not isinstance(sender, (str, bytes))
    ):
        raise InvalidSenderError(sender)


def _short_circuit(sender: object, index: int, failure: Outcome[Any], method: str | None) -> Outcome[Any]:
    logger.debug(
        "combine short-circuited",
        extra={"context": {"index": index, "condition": failure.error.condition.tag}},  # type: ignore[union-attr]
    )
    return Fail(sender, failure, method=method)


def combine(sender: object, outcomes: Iterable[Outcome[Any]], *, method: str | None = None) -> Outcome[None]:
    """Outcome[None] that succeeds iff every outcome did.

    Raises:
        InvalidSenderError: sender is an Outcome
    """
    _check_sender(sender)
    success_message = ""
    for i, outcome in enumerate(outcomes):
        if outcome.failed:
            return _short_circuit(sender, i, outcome, method)
        if outcome.success_message:
            success_message = outcome.success_message
    return Outcome(None, None, success_message)


def combine_values(sender: object, outcomes: Iterable[Outcome[T]], *, method: str | None = None) -> Outcome[list[T]]:
    """Outcome carrying every value in input order, built only if all succeeded.

    Raises:
        InvalidSenderError: sender is an Outcome
    """
    _check_sender(sender)
    success_message = ""
    values: list[T] = []
    for i, outcome in enumerate(outcomes):
        if outcome.failed:
            return _short_circuit(sender, i, outcome, method)
        if outcome.success_message:
            success_message = outcome.success_message
        values.append(outcome.value)  # type: ignore[arg-type]
    return Outcome(values, None, success_message)


def combine_all(sender: object, *outcomes: Outcome[Any], method: str | None = None) -> Outcome[None]:
    """Fixed-arity form of combine().

    Raises:
        InvalidSenderError: sender is an Outcome or a collection (a common slip
            is passing the outcome list itself as the first argument)
    """
    _check_sender(sender, reject_collections=True)
    return combine(sender, outcomes, method=method)
