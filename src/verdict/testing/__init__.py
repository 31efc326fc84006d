"""Testing utilities: fixture builders for errors and failed outcomes."""

from .builders import ErrorBuilder

__all__ = ["ErrorBuilder"]
