"""Schema building entities."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

JsonScalar = str | int | float | bool | None


class ConfigurationError(Exception):
    """Raised when a schema is built with inconsistent settings."""


class PropertyMap(Mapping[str, "AnySchema"]):
    """Read-only, hashable property mapping that keeps declaration order."""

    def __init__(self, items: Iterable[tuple[str, AnySchema]] = ()) -> None:
        self._items = dict(items)

    def __getitem__(self, name: str) -> AnySchema:
        return self._items[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PropertyMap):
            return tuple(self._items.items()) == tuple(other._items.items())
        if isinstance(other, Mapping):
            return self._items == dict(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self._items.items()))

    def __repr__(self) -> str:
        return f"PropertyMap({self._items!r})"


@dataclass(frozen=True)
class StringSchema:
    """String schema, optionally restricted to an ordered set of values."""

    enum: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        if self.enum is None:
            return
        if isinstance(self.enum, str) or not isinstance(self.enum, (list, tuple)):
            raise ConfigurationError("String enum must be a sequence of strings.")
        values = tuple(self.enum)
        if not values:
            raise ConfigurationError("String enum must not be empty.")
        for value in values:
            if not isinstance(value, str):
                raise ConfigurationError(f"String enum values must be strings, got {value!r}.")
        if len(set(values)) != len(values):
            raise ConfigurationError("String enum values must be unique.")
        object.__setattr__(self, "enum", values)


@dataclass(frozen=True)
class ObjectSchema:
    """Object schema with declared, required and additional property rules."""

    properties: Mapping[str, AnySchema] = field(default_factory=dict)
    required: tuple[str, ...] = ()
    additional_properties: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.properties, Mapping):
            raise ConfigurationError("Object properties must be a mapping.")
        properties = dict(self.properties)
        for name, child in properties.items():
            if not isinstance(name, str):
                raise ConfigurationError(f"Property names must be strings, got {name!r}.")
            if not isinstance(child, (StringSchema, ObjectSchema, ConstSchema)):
                raise ConfigurationError(
                    f"Property '{name}' must be a schema, got {type(child).__name__}."
                )

        if isinstance(self.required, str):
            raise ConfigurationError("Required property names must be a sequence of strings.")
        required = tuple(self.required)
        seen: set[str] = set()
        for name in required:
            if not isinstance(name, str):
                raise ConfigurationError(
                    f"Required property names must be strings, got {name!r}."
                )
            if name not in properties:
                raise ConfigurationError(f"Required property '{name}' is not declared.")
            if name in seen:
                raise ConfigurationError(f"Required property '{name}' is listed twice.")
            seen.add(name)

        if not isinstance(self.additional_properties, bool):
            raise ConfigurationError("additional_properties must be a boolean.")

        object.__setattr__(self, "properties", PropertyMap(properties.items()))
        object.__setattr__(self, "required", required)


@dataclass(frozen=True, eq=False)
class ConstSchema:
    """Schema accepting exactly one scalar value."""

    value: JsonScalar

    def __post_init__(self) -> None:
        if self.value is not None and not isinstance(self.value, (str, int, float, bool)):
            raise ConfigurationError(
                f"Const value must be a JSON scalar, got {type(self.value).__name__}."
            )
        if isinstance(self.value, float) and not math.isfinite(self.value):
            raise ConfigurationError("Const value must be a finite number.")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConstSchema):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def _identity(self) -> tuple[type, Any]:
        # bool is an int subclass; 1, 1.0 and True render differently
        return (type(self.value), self.value)


AnySchema = StringSchema | ObjectSchema | ConstSchema
