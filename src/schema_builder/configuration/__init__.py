"""Definition file loading exports."""

from schema_builder.schema_building import ConfigurationError

from .loader import load_definition, load_instance

__all__ = ["ConfigurationError", "load_definition", "load_instance"]
