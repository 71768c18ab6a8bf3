"""Request validation for the OTUI HTTP endpoints."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from otui.models import WidgetNode


# Validation limits
MAX_SOURCE_LENGTH = 1024 * 1024
MAX_TREE_DEPTH = 64


class ValidationError(Exception):
    """Validation failed."""

    pass


class RequestValidator(BaseModel):
    """Base validator: camelCase input, unknown fields ignored, immutable."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore", frozen=True
    )


class ParseRequest(RequestValidator):
    """Validated parse request."""

    code: str = Field(default="", validate_default=True)
    widget_definitions: dict[str, Any] = Field(default_factory=dict)

    @field_validator("code", mode="before")
    @classmethod
    def validate_code(cls, v: Any) -> Any:
        """Reject missing or blank source."""
        if v is None or (isinstance(v, str) and not v.strip()):
            raise ValueError("Missing OTUI code")
        return v


class ExportRequest(RequestValidator):
    """Validated export request."""

    widgets: list[WidgetNode] = Field(default=None, validate_default=True)

    @field_validator("widgets", mode="before")
    @classmethod
    def validate_widgets(cls, v: Any) -> Any:
        """Require a JSON array."""
        if not isinstance(v, list):
            raise ValueError("Missing widgets array")
        return v


def _describe(exc: PydanticValidationError) -> str:
    """First validation error as a short message."""
    error = exc.errors()[0]
    ctx_error = error.get("ctx", {}).get("error")
    if isinstance(ctx_error, ValueError):
        return str(ctx_error)
    location = ".".join(str(part) for part in error["loc"])
    return f"{location}: {error['msg']}" if location else error["msg"]


def validate_request(model: type[RequestValidator], payload: Any) -> Any:
    """
    Validate a JSON payload against a request model.

    Raises:
        ValidationError: With the first problem found
    """
    try:
        return model.model_validate(payload if payload is not None else {})
    except PydanticValidationError as e:
        raise ValidationError(_describe(e)) from e


def validate_source_size(code: str, max_length: int = MAX_SOURCE_LENGTH) -> None:
    """
    Bound the amount of source a single parse may read.

    Raises:
        ValidationError: If the source is longer than ``max_length`` characters
    """
    if len(code) > max_length:
        raise ValidationError(f"OTUI code length {len(code)} exceeds maximum {max_length}")


def validate_tree_depth(widgets: list[WidgetNode], max_depth: int = MAX_TREE_DEPTH) -> None:
    """
    Bound widget nesting before the exporter recurses into it.

    Raises:
        ValidationError: If any widget is nested deeper than ``max_depth``
    """
    pending = [(widget, 1) for widget in widgets]
    while pending:
        node, depth = pending.pop()
        if depth > max_depth:
            raise ValidationError(f"Widget nesting depth {depth} exceeds maximum {max_depth}")
        pending.extend((child, depth + 1) for child in node.children)
