"""Structured failure record carried by failed Outcomes.

An Error is created once where the failure originates (Error.create) and
re-stamped at every frame it propagates through (Error.update). Only the most
recent frame's class and method are kept; condition and fault never change.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Self

import orjson
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from verdict.callsite import resolve_method, sender_name
from verdict.config import get_settings

from .conditions import UNSPECIFIED, ErrorCondition, classify_exception

logger = logging.getLogger("verdict.errors")


class Error(BaseModel):
    """What went wrong, where it was last seen, and diagnostic annotations.

    Attributes:
        condition: Category of the failure with its user-facing message
        fault: Exception that triggered the failure, if any (opaque)
        class_name: Type name of the last frame that touched the error
        method_name: Method name of the last frame that touched the error
        additional_data: Free-form string annotations, insertion ordered
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
        revalidate_instances="never",
        json_schema_extra={
            "title": "Error",
            "examples": [{
                "condition": {"tag": "NOT_FOUND", "message": "The requested item could not be found"},
                "class_name": "UserRepository",
                "method_name": "load",
                "additional_data": {"user_id": "42"},
            }],
        },
    )

    condition: ErrorCondition = UNSPECIFIED
    fault: BaseException | None = Field(default=None, repr=False)
    class_name: str = ""
    method_name: str = ""
    additional_data: dict[str, str] = Field(default_factory=dict)

    @field_validator("additional_data", mode="before")
    @classmethod
    def _stringify_data(cls, v: object) -> object:
        """Accept any mapping and coerce keys and values to str."""
        return {str(k): str(val) for k, val in v.items()} if isinstance(v, Mapping) else v

    @field_serializer("fault")
    def _serialize_fault(self, v: BaseException | None) -> dict[str, str] | None:
        return {"type": type(v).__name__, "message": str(v)} if v is not None else None

    def __hash__(self) -> int:
        return hash((self.condition, self.class_name, self.method_name, id(self.fault)))

    # ─── Creation & Propagation ─────────────────────────────────────────

    @classmethod
    def create(
        cls,
        sender: object,
        condition: ErrorCondition = UNSPECIFIED,
        fault: BaseException | None = None,
        method: str | None = None,
        *,
        data: Mapping[str, object] | None = None,
    ) -> Self:
        """Create a new error at the failure's origin, stamped with sender's identity.

        Reads LoggingSettings through get_settings(), so malformed VERDICT_LOG_*
        variables raise pydantic.ValidationError here. Call get_settings() or
        configure_from_settings() at startup to surface that once.
        """
        error = cls(
            condition=condition,
            fault=fault,
            class_name=sender_name(sender),
            method_name=resolve_method(method),
            additional_data=data or {},
        )
        logger.debug(
            "error created",
            extra={"context": {"condition": condition.tag, "class": error.class_name, "method": error.method_name}},
        )
        settings = get_settings().logging
        if settings.log_failures:
            logger.log(getattr(logging, settings.failure_level), "outcome failed: %s", error,
                       extra={"context": error.to_dict()})
        return error

    @classmethod
    def update(cls, sender: object, error: Error, method: str | None = None) -> Self:
        """Copy error with class and method overwritten by the propagating frame."""
        updated = error.model_copy(update={
            "class_name": sender_name(sender),
            "method_name": resolve_method(method),
            "additional_data": dict(error.additional_data),
        })
        logger.debug(
            "error updated",
            extra={"context": {
                "condition": error.condition.tag,
                "from": f"{error.class_name}.{error.method_name}",
                "to": f"{updated.class_name}.{updated.method_name}",
            }},
        )
        return updated

    @classmethod
    def from_exception(
        cls,
        sender: object,
        exc: BaseException,
        method: str | None = None,
        *,
        condition: ErrorCondition | None = None,
    ) -> Self:
        """Create from an exception, classifying it unless a condition is given."""
        return cls.create(sender, condition or classify_exception(exc), exc, method)

    def with_data(self, mapping: Mapping[str, object] | None = None, /, **items: object) -> Error:
        """Return a copy with extra annotations merged in (later keys win)."""
        merged = {**self.additional_data}
        merged.update((str(k), str(v)) for k, v in (mapping or {}).items())
        merged.update((k, str(v)) for k, v in items.items())
        return self.model_copy(update={"additional_data": merged})

    # ─── Rendering ──────────────────────────────────────────────────────

    def render(self, *, include_fault: bool | None = None, include_data: bool | None = None) -> str:
        """Format as a single line. Unset flags fall back to RenderSettings.

        Raises pydantic.ValidationError when unset flags are resolved against
        malformed VERDICT_RENDER_* variables.
        """
        settings = get_settings().render
        parts = [f"{self.condition.message} | Class: {self.class_name} | Method: {self.method_name}"]
        if self.fault is not None and (settings.include_fault if include_fault is None else include_fault):
            parts.append(f" | Exception: {type(self.fault).__name__}: {self.fault}")
        if self.additional_data and (settings.include_data if include_data is None else include_data):
            parts.append(" | Data: " + ", ".join(f"{k}={v}" for k, v in self.additional_data.items()))
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()

    def to_dict(self) -> dict[str, object]:
        """JSON-compatible dict (fault reduced to type and message)."""
        return self.model_dump(mode="json")

    def to_json(self) -> str:
        return orjson.dumps(self.to_dict()).decode()
