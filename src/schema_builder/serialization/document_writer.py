"""Canonical JSON Schema document rendering."""

from __future__ import annotations

import json
from typing import Any

from schema_builder.schema_building.schema_models import (
    AnySchema,
    ConstSchema,
    ObjectSchema,
    StringSchema,
)


def to_document(schema: AnySchema) -> dict[str, Any]:
    """Return the JSON Schema document for a schema value."""
    if isinstance(schema, StringSchema):
        return _string_document(schema)
    if isinstance(schema, ObjectSchema):
        return _object_document(schema)
    if isinstance(schema, ConstSchema):
        return {"const": schema.value}
    raise TypeError(f"Unsupported schema value: {type(schema).__name__}")


def to_json(schema: AnySchema, *, indent: int | None = None) -> str:
    """Render the canonical document as JSON text, keeping keyword order."""
    return json.dumps(to_document(schema), indent=indent, ensure_ascii=False)


def _string_document(schema: StringSchema) -> dict[str, Any]:
    document: dict[str, Any] = {"type": "string"}
    if schema.enum is not None:
        document["enum"] = list(schema.enum)
    return document


def _object_document(schema: ObjectSchema) -> dict[str, Any]:
    document: dict[str, Any] = {"type": "object"}
    if schema.properties:
        document["properties"] = {
            name: to_document(child) for name, child in schema.properties.items()
        }
    if schema.required:
        document["required"] = list(schema.required)
    document["additionalProperties"] = schema.additional_properties
    return document
