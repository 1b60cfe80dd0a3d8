"""Strict decoding of response bodies into schema models.

Architecture:
    decode() runs a pydantic TypeAdapter for the requested shape and turns
    any pydantic validation failure into a DeserializationError whose issues
    are limited to three kinds: MissingField, UnknownField and TypeMismatch.
    Callers never see pydantic's error format.

Design Decisions:
    - Raw bytes and str are parsed by pydantic's JSON parser; mappings and
      lists that were already parsed are validated in python mode
    - Issue names are wire names of the innermost field; the full path is
      kept on the issue for diagnostics but is not part of equality
    - Every failure is logged once as ``schema_drift_detected``
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, TypeVar, get_args, get_origin

import pydantic
from pydantic import TypeAdapter

from ..core.exceptions import (
    DeserializationError,
    FieldIssue,
    MissingField,
    TypeMismatch,
    UnknownField,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

BODY = "<body>"

# pydantic error type -> what the field should have held
_EXPECTED: dict[str, str] = {
    "string_type": "string",
    "int_type": "integer",
    "bool_type": "boolean",
    "list_type": "array",
    "dict_type": "object",
    "model_type": "object",
    "model_attributes_type": "object",
    "greater_than_equal": "non-negative integer",
    "string_pattern_mismatch": "24-digit hex object id",
    "iso_datetime": "ISO-8601 datetime string",
    "whole_seconds": "whole number of seconds",
    "like_counter": "non-negative integer",
    "json_invalid": "valid JSON",
    "json_type": "JSON document",
    "invalid_json_value": "JSON value",
}


def json_type_name(value: Any) -> str:
    """Name of the JSON type ``value`` was decoded from."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int | float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list | tuple):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def shape_name(shape: Any) -> str:
    origin = get_origin(shape)
    if origin is not None:
        args = ", ".join(shape_name(arg) for arg in get_args(shape))
        return f"{getattr(origin, '__name__', origin)}[{args}]"
    return getattr(shape, "__name__", repr(shape))


@lru_cache(maxsize=128)
def _adapter(shape: Any) -> TypeAdapter[Any]:
    return TypeAdapter(shape)


def _field_name(loc: tuple[str | int, ...]) -> str:
    for part in reversed(loc):
        if isinstance(part, str):
            return part
    return BODY


def to_issue(error: dict[str, Any]) -> FieldIssue:
    """Convert one pydantic error record into a field issue."""
    loc = tuple(error.get("loc", ()))
    kind = error["type"]
    name = _field_name(loc)
    if kind == "missing":
        return MissingField(name, location=loc)
    if kind == "extra_forbidden":
        return UnknownField(name, location=loc)
    if kind == "json_invalid":
        return TypeMismatch(BODY, _EXPECTED[kind], error.get("msg", "invalid JSON"), location=loc)
    expected = _EXPECTED.get(kind, error.get("msg", kind))
    return TypeMismatch(name, expected, json_type_name(error.get("input")), location=loc)


def decode(shape: type[T] | Any, raw: bytes | str | Any) -> T:
    """Validate ``raw`` against ``shape`` and return the typed value.

    Args:
        shape: Schema model, or a type expression such as ``list[FeedArticle]``
        raw: JSON text (bytes or str) or already-parsed JSON data

    Returns:
        The decoded value

    Raises:
        DeserializationError: If the body does not match the shape exactly
    """
    adapter = _adapter(shape)
    try:
        if isinstance(raw, bytes | bytearray | str):
            return adapter.validate_json(raw)
        return adapter.validate_python(raw)
    except pydantic.ValidationError as exc:
        issues = [to_issue(error) for error in exc.errors()]
        name = shape_name(shape)
        logger.warning(
            "schema_drift_detected",
            extra={
                "shape": name,
                "issue_count": len(issues),
                "first_issue": issues[0].describe(),
            },
        )
        raise DeserializationError(issues, shape=name) from exc
