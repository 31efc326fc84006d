"""Error records, conditions and contract-violation exceptions.

- ErrorCondition: category tag plus default user-facing message
- Error: failure record with last-toucher provenance and annotations
- ContractViolation and subclasses: raised on misuse of the outcome API
"""

from .conditions import (
    INVALID_ARGUMENT,
    NETWORK_ERROR,
    NOT_FOUND,
    PARSE_ERROR,
    PERMISSION_DENIED,
    TIMEOUT,
    UNHANDLED_EXCEPTION,
    UNSPECIFIED,
    VALIDATION_FAILED,
    ErrorCondition,
    classify_exception,
    define_condition,
    get_condition,
    registered_conditions,
)
from .error import Error
from .exceptions import (
    ContractViolation,
    InvalidSenderError,
    PreviousOutcomeSucceededError,
    UnwrapError,
    VerdictError,
)

__all__ = [
    # Conditions
    "ErrorCondition", "define_condition", "get_condition", "registered_conditions", "classify_exception",
    "UNSPECIFIED", "UNHANDLED_EXCEPTION", "INVALID_ARGUMENT", "NOT_FOUND", "PERMISSION_DENIED",
    "TIMEOUT", "NETWORK_ERROR", "PARSE_ERROR", "VALIDATION_FAILED",
    # Error record
    "Error",
    # Exceptions
    "VerdictError", "ContractViolation", "InvalidSenderError", "PreviousOutcomeSucceededError", "UnwrapError",
]
