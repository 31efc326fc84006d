"""Tests for the ErrorBuilder fixture helper."""

import pytest

from verdict.errors import TIMEOUT, UNSPECIFIED
from verdict.outcome import Fail
from verdict.testing import ErrorBuilder


class Caller:
    pass


def test_builder_defaults() -> None:
    error = ErrorBuilder().build()

    assert error.condition == UNSPECIFIED
    assert error.fault is None
    assert error.class_name == ""
    assert error.method_name == ""
    assert error.additional_data == {}


def test_builder_sets_every_field() -> None:
    fault = TimeoutError("slow")
    error = (
        ErrorBuilder()
        .with_condition(TIMEOUT)
        .with_fault(fault)
        .with_class("UserRepository")
        .with_method("load")
        .with_data("user_id", 42)
        .with_data("region", "eu")
        .build()
    )

    assert error.condition == TIMEOUT
    assert error.fault is fault
    assert error.class_name == "UserRepository"
    assert error.method_name == "load"
    assert error.additional_data == {"user_id": "42", "region": "eu"}


def test_builder_rejects_duplicate_keys() -> None:
    with pytest.raises(KeyError):
        ErrorBuilder().with_data("k", 1).with_data("k", 2)


def test_built_outcome_propagates_like_any_failure() -> None:
    built = ErrorBuilder().with_condition(TIMEOUT).with_class("Origin").with_method("run").build_outcome()
    propagated = Fail(Caller(), built, method="handle")

    assert built.failed
    assert propagated.error.condition == TIMEOUT  # type: ignore[union-attr]
    assert propagated.error.class_name == "Caller"  # type: ignore[union-attr]
    assert propagated.error.method_name == "handle"  # type: ignore[union-attr]
