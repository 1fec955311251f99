"""JSON Schema document parsing into schema values."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

from schema_builder.schema_building.schema_builders import (
    const_schema,
    object_schema,
    string_schema,
)
from schema_builder.schema_building.schema_models import AnySchema

_STRING_KEYWORDS = frozenset({"type", "enum"})
_OBJECT_KEYWORDS = frozenset({"type", "properties", "required", "additionalProperties"})
_CONST_KEYWORDS = frozenset({"const"})


class SchemaError(Exception):
    """Raised when a document cannot be mapped to a schema value."""


def from_json(text: str) -> AnySchema:
    """Parse JSON text into a schema value."""
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaError(f"Invalid JSON schema text: {exc}") from exc
    return from_document(document)


def from_document(document: Any) -> AnySchema:
    """Build a schema value from a JSON Schema document."""
    return _read_node(document, pointer="#")


def _read_node(node: Any, *, pointer: str) -> AnySchema:
    if not isinstance(node, Mapping):
        raise SchemaError(f"{pointer}: schema documents must be objects.")

    if "const" in node:
        _reject_unknown_keywords(node, _CONST_KEYWORDS, pointer)
        value = node["const"]
        if isinstance(value, (Mapping, list)):
            raise SchemaError(f"{pointer}: const must be a scalar value.")
        return const_schema(value)

    node_type = node.get("type")
    if node_type == "string":
        _reject_unknown_keywords(node, _STRING_KEYWORDS, pointer)
        return _read_string(node, pointer)
    if node_type == "object":
        _reject_unknown_keywords(node, _OBJECT_KEYWORDS, pointer)
        return _read_object(node, pointer)
    raise SchemaError(f"{pointer}: unsupported schema type {node_type!r}.")


def _read_string(node: Mapping[str, Any], pointer: str) -> AnySchema:
    if "enum" not in node:
        return string_schema()
    enum = node["enum"]
    if not isinstance(enum, list):
        raise SchemaError(f"{pointer}/enum: must be an array.")
    return string_schema(enum)


def _read_object(node: Mapping[str, Any], pointer: str) -> AnySchema:
    raw_properties = node.get("properties", {})
    if not isinstance(raw_properties, Mapping):
        raise SchemaError(f"{pointer}/properties: must be an object.")
    properties = {
        name: _read_node(child, pointer=f"{pointer}/properties/{_escape(str(name))}")
        for name, child in raw_properties.items()
    }

    required = node.get("required", [])
    if isinstance(required, str) or not isinstance(required, Sequence):
        raise SchemaError(f"{pointer}/required: must be an array.")

    additional_properties = node.get("additionalProperties", True)
    if not isinstance(additional_properties, bool):
        raise SchemaError(f"{pointer}/additionalProperties: only boolean values are supported.")

    return object_schema(
        properties,
        required=required,
        additional_properties=additional_properties,
    )


def _reject_unknown_keywords(
    node: Mapping[str, Any], allowed: frozenset[str], pointer: str
) -> None:
    unknown = sorted(str(key) for key in node if key not in allowed)
    if unknown:
        raise SchemaError(f"{pointer}: unsupported keywords: {', '.join(unknown)}.")


def _escape(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")
