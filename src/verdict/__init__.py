"""verdict - Outcomes instead of exceptions for expected failures.

Functions return an Outcome: success (optionally with a value and a success
note) or failure carrying a structured Error. Callers branch on the outcome
instead of catching exceptions, and re-stamp failures with their own identity
as they pass them up, so the final error names the last frame that handled it.

Quick Start:
    >>> from verdict import NOT_FOUND, Fail, Ok, Outcome, combine_values, tracked
    >>>
    >>> class UserRepository:
    ...     @tracked
    ...     def load(self, user_id: int) -> Outcome[str]:
    ...         if user_id != 1:
    ...             return Fail(self, NOT_FOUND, data={"user_id": user_id})
    ...         return Ok("alice")
    >>>
    >>> class UserService:
    ...     def __init__(self) -> None:
    ...         self.repo = UserRepository()
    ...
    ...     @tracked
    ...     def names(self, *ids: int) -> Outcome[list[str]]:
    ...         return combine_values(self, (self.repo.load(i) for i in ids))
    >>>
    >>> UserService().names(1).value
    ['alice']
    >>> print(UserService().names(1, 2))
    FAIL: The requested item could not be found | Class: UserService | Method: names | Data: user_id=2

Contract violations (a succeeded outcome passed to Fail(), an Outcome used as
a combine() sender, unwrap() on a failure) raise ContractViolation subclasses
immediately; they are never turned into outcomes.
"""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = [
    # Outcome
    "Outcome", "Ok", "Fail", "forward", "capture",
    # Aggregation
    "combine", "combine_values", "combine_all",
    # Errors
    "Error", "ErrorCondition", "define_condition", "get_condition", "registered_conditions", "classify_exception",
    "UNSPECIFIED", "UNHANDLED_EXCEPTION", "INVALID_ARGUMENT", "NOT_FOUND", "PERMISSION_DENIED",
    "TIMEOUT", "NETWORK_ERROR", "PARSE_ERROR", "VALIDATION_FAILED",
    "VerdictError", "ContractViolation", "InvalidSenderError", "PreviousOutcomeSucceededError", "UnwrapError",
    # Call site
    "tracked", "current_method", "sender_name",
    # Config
    "VerdictSettings", "get_settings", "clear_settings_cache",
    # Logging
    "configure_logging", "configure_from_settings",
]

_OUTCOME = ("Outcome", "Ok", "Fail", "forward", "capture")
_AGGREGATE = ("combine", "combine_values", "combine_all")
_CALLSITE = ("tracked", "current_method", "sender_name")
_CONFIG = ("VerdictSettings", "get_settings", "clear_settings_cache")
_LOGGING = ("configure_logging", "configure_from_settings")


def __getattr__(name: str):
    """Lazy imports to avoid circular dependencies."""
    if name in _OUTCOME:
        from . import outcome
        return getattr(outcome, name)

    if name in _AGGREGATE:
        from . import aggregate
        return getattr(aggregate, name)

    if name in _CALLSITE:
        from . import callsite
        return getattr(callsite, name)

    if name in _CONFIG:
        from . import config
        return getattr(config, name)

    if name in _LOGGING:
        from . import observability
        return getattr(observability, name)

    if name in __all__:
        from . import errors
        return getattr(errors, name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
