"""Outcome: success or failure of an operation, returned instead of raising.

A succeeded Outcome may carry a value and a success note. A failed one owns an
Error describing what went wrong and which frame last handled it. Callers
branch on succeeded/failed and choose to pass the outcome through, re-stamp
it with their own identity (Fail(self, previous)), or aggregate several
(see verdict.aggregate).

Examples:
    >>> Ok(5).value
    5
    >>> str(Fail(repo, NOT_FOUND, method="load"))
    'FAIL: The requested item could not be found | Class: Repo | Method: load'
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar, overload

from verdict.errors import (
    ContractViolation,
    Error,
    ErrorCondition,
    PreviousOutcomeSucceededError,
    UnwrapError,
    classify_exception,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")
U = TypeVar("U")


class Outcome(Generic[T]):
    """Success (optionally with a value) or failure with an Error.

    Immutable: with_success_message() returns a new instance. The no-value
    form is Outcome[None].
    """

    __slots__ = ("_value", "_error", "_success_message")

    def __init__(self, value: T | None = None, error: Error | None = None, success_message: str = "") -> None:
        # A failed outcome never carries a value
        self._value = value if error is None else None
        self._error = error
        self._success_message = success_message

    # ─── State ─────────────────────────────────────────────────────────

    @property
    def succeeded(self) -> bool:
        return self._error is None

    @property
    def failed(self) -> bool:
        return self._error is not None

    @property
    def value(self) -> T | None:
        """Carried value if succeeded, None if failed."""
        return self._value

    @property
    def error(self) -> Error | None:
        """Error if failed, None if succeeded."""
        return self._error

    @property
    def success_message(self) -> str:
        return self._success_message

    def with_success_message(self, message: str) -> Outcome[T]:
        """Copy with the success note set. Allowed on failed outcomes, where it is immaterial."""
        return Outcome(self._value, self._error, message)

    # ─── Value Extraction ──────────────────────────────────────────────

    def unwrap(self) -> T:
        """Carried value. Raises UnwrapError if failed."""
        if self._error is not None:
            raise UnwrapError(self._error)
        return self._value  # type: ignore[return-value]

    def expect(self, message: str) -> T:
        """Like unwrap() with a custom message in the raised UnwrapError."""
        if self._error is not None:
            raise UnwrapError.expected(self._error, message)
        return self._value  # type: ignore[return-value]

    def unwrap_or(self, default: T) -> T:
        return self._value if self._error is None else default  # type: ignore[return-value]

    def match(self, *, ok: Callable[[T], U], fail: Callable[[Error], U]) -> U:
        """Exhaustive dispatch: ok(value) if succeeded, fail(error) otherwise."""
        return ok(self._value) if self._error is None else fail(self._error)  # type: ignore[arg-type]

    # ─── Dunder Methods ────────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._error is None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Outcome):
            return NotImplemented
        return (
            self._error == other._error
            and self._value == other._value
            and self._success_message == other._success_message
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._error is not None:
            return f"Fail({self._error!r})"
        note = f", success_message={self._success_message!r}" if self._success_message else ""
        return f"Ok({self._value!r}{note})"

    def __str__(self) -> str:
        return "OK" if self._error is None else f"FAIL: {self._error}"

    def __iter__(self) -> Iterator[T]:
        """Yields the value if succeeded, nothing if failed."""
        if self._error is None:
            yield self._value  # type: ignore[misc]


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


@overload
def Ok() -> Outcome[None]: ...
@overload
def Ok(value: T) -> Outcome[T]: ...


def Ok(value: Any = None) -> Outcome[Any]:  # noqa: N802
    """Construct a succeeded outcome, optionally carrying value."""
    return Outcome(value)


@overload
def Fail(
    sender: object,
    cause: ErrorCondition,
    fault: BaseException | None = None,
    *,
    method: str | None = None,
    data: Mapping[str, object] | None = None,
) -> Outcome[Any]: ...
@overload
def Fail(sender: object, cause: Outcome[Any], *, method: str | None = None) -> Outcome[Any]: ...


def Fail(  # noqa: N802
    sender: object,
    cause: ErrorCondition | Outcome[Any],
    fault: BaseException | None = None,
    *,
    method: str | None = None,
    data: Mapping[str, object] | None = None,
) -> Outcome[Any]:
    """Construct a failed outcome.

    With a condition, a new Error is created at this call site. With a
    previous failed outcome, its Error is re-stamped with sender and method
    so the caller's frame becomes the error's provenance.

    Args:
        sender: Calling object or class; only its type name is recorded
        cause: ErrorCondition for a new failure, or a failed Outcome to propagate
        fault: Exception that triggered a new failure
        method: Call-site name; defaults to the innermost @tracked function
        data: Annotations for a new failure

    Raises:
        PreviousOutcomeSucceededError: cause is a succeeded Outcome
        TypeError: cause is neither, or fault/data given with an Outcome cause
    """
    if isinstance(cause, Outcome):
        if fault is not None or data is not None:
            raise TypeError("fault and data cannot be given when propagating a previous outcome")
        if cause._error is None:
            raise PreviousOutcomeSucceededError("Fail")
        return Outcome(None, Error.update(sender, cause._error, method))
    if isinstance(cause, ErrorCondition):
        return Outcome(None, Error.create(sender, cause, fault, method, data=data))
    raise TypeError(f"Fail() expects an ErrorCondition or an Outcome, got {type(cause).__name__}")


def forward(sender: object, previous: Outcome[T], *, method: str | None = None) -> Outcome[T]:
    """Pass an outcome up the chain: Ok(value) on success (note dropped), error re-stamped on failure."""
    if previous._error is None:
        return Outcome(previous._value)
    return Outcome(None, Error.update(sender, previous._error, method))


def capture(
    sender: object,
    func: Callable[..., T],
    *args: Any,
    condition: ErrorCondition | None = None,
    method: str | None = None,
    **kwargs: Any,
) -> Outcome[T]:
    """Call func(*args, **kwargs) and convert a raised Exception into a failed outcome.

    The exception is kept as the error's fault and classified with
    classify_exception() unless condition is given. Contract violations
    propagate unchanged. condition and method are reserved and never
    passed to func.

    Example:
        >>> capture(self, int, "42").value
        42
        >>> capture(self, int, "ff", base=16).value
        255
        >>> capture(self, int, "x").error.condition is INVALID_ARGUMENT
        True
    """
    try:
        return Outcome(func(*args, **kwargs))
    except ContractViolation:
        raise
    except Exception as e:
        return Outcome(None, Error.create(sender, condition or classify_exception(e), e, method))
