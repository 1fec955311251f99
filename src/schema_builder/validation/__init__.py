"""Validation exports."""

from .instance_validator import SchemaCheckError, validate_document, validate_instance
from .key_errors import SchemaKeyError, property_path

__all__ = [
    "SchemaCheckError",
    "SchemaKeyError",
    "property_path",
    "validate_document",
    "validate_instance",
]
