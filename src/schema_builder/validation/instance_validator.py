"""Instance validation through the jsonschema engine."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping
from typing import Any

from jsonschema import Draft7Validator
from jsonschema.exceptions import SchemaError as JsonSchemaError
from jsonschema.exceptions import ValidationError
from jsonschema.validators import extend

from schema_builder.schema_building.schema_models import AnySchema
from schema_builder.serialization.document_writer import to_document

from .key_errors import SchemaKeyError, property_path

_LOGGER = logging.getLogger(__name__)

_DEFAULT_KEYWORDS = Draft7Validator.VALIDATORS


class SchemaCheckError(Exception):
    """Raised when a document is not a valid Draft 7 JSON Schema."""


def validate_instance(schema: AnySchema, instance: Any) -> list[SchemaKeyError]:
    """Validate `instance` against a schema value."""
    return validate_document(to_document(schema), instance)


def validate_document(document: Mapping[str, Any], instance: Any) -> list[SchemaKeyError]:
    """Validate `instance` against a JSON Schema document, in engine order."""
    try:
        _KeyErrorValidator.check_schema(document)
    except JsonSchemaError as exc:
        raise SchemaCheckError(f"Invalid JSON schema document: {exc.message}") from exc

    validator = _KeyErrorValidator(document)
    key_errors = [
        SchemaKeyError(
            property_path=property_path(error.absolute_path),
            invalid_value=error.instance,
            message=error.message,
        )
        for error in validator.iter_errors(instance)
    ]
    _LOGGER.debug("Validation finished with %d key error(s).", len(key_errors))
    return key_errors


def _type(validator: Any, types: Any, instance: Any, schema: Any) -> Iterator[ValidationError]:
    expected = [types] if isinstance(types, str) else list(types)
    if not any(validator.is_type(instance, name) for name in expected):
        yield ValidationError(
            f"type should be {' or '.join(expected)}, got {_json_type_name(instance)}"
        )


def _enum(validator: Any, enums: Any, instance: Any, schema: Any) -> Iterator[ValidationError]:
    for _ in _DEFAULT_KEYWORDS["enum"](validator, enums, instance, schema):
        yield ValidationError(f"should be one of [{', '.join(_render(value) for value in enums)}]")


def _const(validator: Any, const: Any, instance: Any, schema: Any) -> Iterator[ValidationError]:
    for _ in _DEFAULT_KEYWORDS["const"](validator, const, instance, schema):
        yield ValidationError(f"must equal {_render(const)}")


def _required(
    validator: Any, required: Any, instance: Any, schema: Any
) -> Iterator[ValidationError]:
    if not validator.is_type(instance, "object"):
        return
    for name in required:
        if name not in instance:
            yield ValidationError(f"{_render(name)} value is required")


def _additional_properties(
    validator: Any, additional: Any, instance: Any, schema: Any
) -> Iterator[ValidationError]:
    errors = _DEFAULT_KEYWORDS["additionalProperties"](validator, additional, instance, schema)
    if additional is not False:
        yield from errors
        return
    for _ in errors:
        yield ValidationError("additional properties are not allowed")
        return


_KeyErrorValidator = extend(
    Draft7Validator,
    validators={
        "type": _type,
        "enum": _enum,
        "const": _const,
        "required": _required,
        "additionalProperties": _additional_properties,
    },
)


def _render(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)


def _json_type_name(instance: Any) -> str:
    if instance is None:
        return "null"
    if isinstance(instance, bool):
        return "boolean"
    if isinstance(instance, int):
        return "integer"
    if isinstance(instance, float):
        return "integer" if instance.is_integer() else "number"
    if isinstance(instance, str):
        return "string"
    if isinstance(instance, (list, tuple)):
        return "array"
    if isinstance(instance, Mapping):
        return "object"
    return type(instance).__name__
