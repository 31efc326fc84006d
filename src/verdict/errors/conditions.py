"""Error conditions: the category of a failure plus its user-facing message.

Conditions form an extensible registry keyed by tag. The built-in set covers
common failure kinds; applications add their own with define_condition().
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class ErrorCondition(BaseModel):
    """Category of a failure with a stable tag and a default message.

    Attributes:
        tag: Machine-readable identifier, unique within the registry
        message: Human-readable description shown to users
    """

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        extra="forbid",
        json_schema_extra={
            "title": "Error Condition",
            "examples": [{"tag": "NOT_FOUND", "message": "The requested item could not be found"}],
        },
    )

    tag: Annotated[str, Field(min_length=1, description="Stable condition identifier")]
    message: Annotated[str, Field(min_length=1, description="Default user-facing message")]

    def __str__(self) -> str:
        return self.message


_REGISTRY: dict[str, ErrorCondition] = {}


def define_condition(tag: str, message: str) -> ErrorCondition:
    """Register a condition. Redefining a tag with the same message is a no-op."""
    condition = ErrorCondition(tag=tag, message=message)
    if (existing := _REGISTRY.get(condition.tag)) is not None:
        if existing.message != condition.message:
            raise ValueError(f"Condition {condition.tag!r} is already defined with message {existing.message!r}")
        return existing
    _REGISTRY[condition.tag] = condition
    return condition


def get_condition(tag: str) -> ErrorCondition:
    """Look up a registered condition by tag. Raises KeyError if unknown."""
    try:
        return _REGISTRY[tag]
    except KeyError:
        raise KeyError(f"Unknown error condition: {tag!r}") from None


def registered_conditions() -> tuple[ErrorCondition, ...]:
    """All registered conditions in definition order."""
    return tuple(_REGISTRY.values())


# ═══════════════════════════════════════════════════════════════════════════════
# Built-in Conditions
# ═══════════════════════════════════════════════════════════════════════════════

UNSPECIFIED = define_condition("UNSPECIFIED", "An unspecified error occurred")
UNHANDLED_EXCEPTION = define_condition("UNHANDLED_EXCEPTION", "An unexpected exception was raised")
INVALID_ARGUMENT = define_condition("INVALID_ARGUMENT", "An argument was not valid")
NOT_FOUND = define_condition("NOT_FOUND", "The requested item could not be found")
PERMISSION_DENIED = define_condition("PERMISSION_DENIED", "Permission was denied")
TIMEOUT = define_condition("TIMEOUT", "The operation timed out")
NETWORK_ERROR = define_condition("NETWORK_ERROR", "A network error occurred")
PARSE_ERROR = define_condition("PARSE_ERROR", "The data could not be parsed")
VALIDATION_FAILED = define_condition("VALIDATION_FAILED", "Validation failed")


# Ordered for priority: first pattern found in "<TypeName> <message>" wins
_PATTERN_CONDITIONS: dict[str, ErrorCondition] = {
    "timeout": TIMEOUT,
    "connection": NETWORK_ERROR,
    "network": NETWORK_ERROR,
    "permission": PERMISSION_DENIED,
    "forbidden": PERMISSION_DENIED,
    "parse": PARSE_ERROR,
    "json": PARSE_ERROR,
    "decode": PARSE_ERROR,
    "validation": VALIDATION_FAILED,
    "notfound": NOT_FOUND,
    "keyerror": NOT_FOUND,
    "lookup": NOT_FOUND,
    "valueerror": INVALID_ARGUMENT,
    "typeerror": INVALID_ARGUMENT,
}


@lru_cache(maxsize=256)
def _classify_cached(exc_key: str) -> ErrorCondition:
    haystack = exc_key.lower()
    for pattern, condition in _PATTERN_CONDITIONS.items():
        if pattern in haystack:
            return condition
    return UNHANDLED_EXCEPTION


def classify_exception(exc: BaseException) -> ErrorCondition:
    """Map an exception to a built-in condition via its type name and message."""
    return _classify_cached(f"{type(exc).__name__} {exc}")
