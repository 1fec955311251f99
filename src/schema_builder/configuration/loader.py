"""Definition and sample instance file loader."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from schema_builder.schema_building.schema_models import AnySchema, ConfigurationError
from schema_builder.serialization.document_reader import SchemaError, from_document

_LOGGER = logging.getLogger(__name__)

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class _JsonCompatibleLoader(yaml.SafeLoader):
    """Safe loader that leaves YAML timestamps as plain strings."""


_JsonCompatibleLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def load_definition(definition_path: Path | str) -> AnySchema:
    """Load a YAML/JSON schema definition file and build its schema value."""
    path = Path(definition_path)
    parsed = _read_yaml(path, label="Schema definition")
    if not isinstance(parsed, Mapping):
        raise ConfigurationError(f"Schema definition root must be a mapping: {path}")
    try:
        schema = from_document(parsed)
    except SchemaError as exc:
        raise ConfigurationError(f"Invalid schema definition {path}: {exc}") from exc
    _LOGGER.debug("Loaded %s definition from %s", type(schema).__name__, path)
    return schema


def load_instance(instance_path: Path | str) -> Any:
    """Load a YAML/JSON sample instance file."""
    path = Path(instance_path)
    instance = _read_yaml(path, label="Instance")
    _LOGGER.debug("Loaded instance from %s", path)
    return instance


def _read_yaml(path: Path, *, label: str) -> Any:
    if not path.exists():
        raise ConfigurationError(f"{label} file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Failed to read {label.lower()} file {path}: {exc}") from exc
    try:
        return yaml.load(text, Loader=_JsonCompatibleLoader)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse {label.lower()} file {path}: {exc}") from exc
