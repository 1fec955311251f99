"""Typed constructors for schema entities."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from .schema_models import (
    AnySchema,
    ConfigurationError,
    ConstSchema,
    JsonScalar,
    ObjectSchema,
    StringSchema,
)


def string_schema(enum: Iterable[str] | None = None) -> StringSchema:
    """Build a string schema, optionally restricted to `enum` values in order."""
    if enum is None:
        return StringSchema()
    if isinstance(enum, str):
        raise ConfigurationError("String enum must be a sequence of strings, not a string.")
    return StringSchema(enum=tuple(enum))


def object_schema(
    properties: Mapping[str, AnySchema],
    required: Iterable[str] = (),
    additional_properties: bool = True,
) -> ObjectSchema:
    """Build an object schema; every required name must be a declared property."""
    if isinstance(required, str):
        raise ConfigurationError("Required property names must be a sequence, not a string.")
    return ObjectSchema(
        properties=properties,
        required=tuple(required),
        additional_properties=additional_properties,
    )


def const_schema(value: JsonScalar) -> ConstSchema:
    """Build a schema matching exactly one scalar value."""
    if isinstance(value, (Mapping, list, tuple)):
        raise ConfigurationError("Const schemas only accept scalar values.")
    return ConstSchema(value=value)
