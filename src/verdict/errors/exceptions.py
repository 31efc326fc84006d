"""Exceptions raised for misuse of the outcome API.

Domain failures travel as failed Outcomes. These exceptions cover programmer
errors only and are never converted into an Outcome.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from .error import Error


class VerdictError(Exception):
    """Base class for all exceptions raised by verdict."""


class ContractViolation(VerdictError):
    """The outcome API was called in a way its contract forbids."""


class InvalidSenderError(ContractViolation):
    """Sender passed to an aggregation is an Outcome or a collection.

    The resulting error would be stamped with a meaningless type name
    instead of the real calling context.
    """

    __slots__ = ("sender_type",)

    def __init__(self, sender: object) -> None:
        self.sender_type = type(sender).__name__
        super().__init__(
            f"Invalid sender of type {self.sender_type!r}: pass the calling object (self), "
            "not an Outcome or a collection"
        )


class PreviousOutcomeSucceededError(ContractViolation):
    """A succeeded Outcome was passed where a failed one is required."""

    def __init__(self, operation: str = "Fail") -> None:
        super().__init__(f"{operation}() requires a failed previous outcome, got a succeeded one")


class UnwrapError(ContractViolation):
    """Value extraction attempted on a failed Outcome."""

    __slots__ = ("error",)

    def __init__(self, error: Error, message: str = "unwrap() on a failed outcome") -> None:
        self.error = error
        super().__init__(f"{message}: {error}")

    @classmethod
    def expected(cls, error: Error, message: str) -> Self:
        """Create with a caller-supplied message (see Outcome.expect)."""
        return cls(error, message)
