"""Serialization exports."""

from .document_reader import SchemaError, from_document, from_json
from .document_writer import to_document, to_json

__all__ = ["SchemaError", "from_document", "from_json", "to_document", "to_json"]
