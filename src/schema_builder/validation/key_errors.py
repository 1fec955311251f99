"""Validation result entities."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SchemaKeyError:
    """One validation failure reported for an instance location."""

    property_path: str
    invalid_value: Any
    message: str


def property_path(tokens: Iterable[str | int]) -> str:
    """Return the JSON Pointer for instance path tokens; the root is `/`."""
    escaped = [str(token).replace("~", "~0").replace("/", "~1") for token in tokens]
    return "/" + "/".join(escaped)
