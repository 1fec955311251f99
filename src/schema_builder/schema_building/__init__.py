"""Schema building exports."""

from .schema_builders import const_schema, object_schema, string_schema
from .schema_models import (
    AnySchema,
    ConfigurationError,
    ConstSchema,
    JsonScalar,
    ObjectSchema,
    StringSchema,
)

__all__ = [
    "AnySchema",
    "ConfigurationError",
    "ConstSchema",
    "JsonScalar",
    "ObjectSchema",
    "StringSchema",
    "const_schema",
    "object_schema",
    "string_schema",
]
