"""Programmatic JSON Schema builders with jsonschema-backed validation."""

import logging

from .schema_building import (
    AnySchema,
    ConfigurationError,
    ConstSchema,
    ObjectSchema,
    StringSchema,
    const_schema,
    object_schema,
    string_schema,
)
from .serialization import SchemaError, from_document, from_json, to_document, to_json
from .validation import SchemaCheckError, SchemaKeyError, validate_document, validate_instance

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AnySchema",
    "ConfigurationError",
    "ConstSchema",
    "ObjectSchema",
    "StringSchema",
    "const_schema",
    "object_schema",
    "string_schema",
    "SchemaError",
    "from_document",
    "from_json",
    "to_document",
    "to_json",
    "SchemaCheckError",
    "SchemaKeyError",
    "validate_document",
    "validate_instance",
]
