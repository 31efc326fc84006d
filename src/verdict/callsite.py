"""Call-site identity for error provenance.

Errors record the class and method of the last frame that touched them. The
class comes from the sender; the method name is either passed explicitly
(method="...") or taken from the innermost function decorated with @tracked.

    >>> class Repo:
    ...     @tracked
    ...     def load(self, key: str) -> Outcome[str]:
    ...         return Fail(self, NOT_FOUND)  # method_name == "load"
"""

from __future__ import annotations

import inspect
from contextvars import ContextVar
from functools import wraps
from typing import Callable, ParamSpec, TypeVar

P = ParamSpec("P")
T = TypeVar("T")

_current_method: ContextVar[str] = ContextVar("verdict_current_method", default="")


def tracked(func: Callable[P, T]) -> Callable[P, T]:
    """Record func.__name__ as the current method while func runs."""
    name = func.__name__

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        token = _current_method.set(name)
        try:
            return func(*args, **kwargs)
        finally:
            _current_method.reset(token)

    @wraps(func)
    async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        token = _current_method.set(name)
        try:
            return await func(*args, **kwargs)  # type: ignore[misc]
        finally:
            _current_method.reset(token)

    return async_wrapper if inspect.iscoroutinefunction(func) else wrapper  # type: ignore[return-value]


def current_method() -> str:
    """Name of the innermost active @tracked function, or ""."""
    return _current_method.get()


def resolve_method(method: str | None) -> str:
    """Explicit method name if given, else the tracked one."""
    return method if method is not None else _current_method.get()


def sender_name(sender: object) -> str:
    """Type name used to stamp errors: the class itself for classes, else the instance's type."""
    return sender.__name__ if isinstance(sender, type) else type(sender).__name__
