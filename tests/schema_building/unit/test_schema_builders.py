"""Schema builder tests."""

from __future__ import annotations

import copy
import pickle

import pytest
from schema_builder.schema_building import (
    ConfigurationError,
    ConstSchema,
    ObjectSchema,
    StringSchema,
    const_schema,
    object_schema,
    string_schema,
)


def test_string_schema_without_enum() -> None:
    schema = string_schema()

    assert schema == StringSchema()
    assert schema.enum is None


def test_string_schema_keeps_enum_order_as_tuple() -> None:
    schema = string_schema(["one", "two", "three"])

    assert schema.enum == ("one", "two", "three")


@pytest.mark.parametrize(
    ("enum", "message"),
    [
        ([], "must not be empty"),
        (["one", 2], "must be strings"),
        (["one", "one"], "must be unique"),
        ("one", "not a string"),
    ],
)
def test_string_schema_rejects_invalid_enum(enum: object, message: str) -> None:
    with pytest.raises(ConfigurationError, match=message):
        string_schema(enum)  # type: ignore[arg-type]


def test_direct_construction_enforces_enum_invariants() -> None:
    with pytest.raises(ConfigurationError, match="must not be empty"):
        StringSchema(enum=())


def test_object_schema_preserves_property_and_required_order() -> None:
    schema = object_schema(
        {"b": string_schema(), "a": const_schema(1)},
        required=["a", "b"],
        additional_properties=False,
    )

    assert list(schema.properties) == ["b", "a"]
    assert schema.required == ("a", "b")
    assert schema.additional_properties is False


def test_object_schema_defaults_allow_additional_properties() -> None:
    schema = object_schema({})

    assert schema == ObjectSchema()
    assert schema.required == ()
    assert schema.additional_properties is True


def test_object_schema_rejects_undeclared_required_property() -> None:
    with pytest.raises(ConfigurationError, match="Required property 'missing' is not declared"):
        object_schema({"field": string_schema()}, required=["missing"])


def test_object_schema_rejects_duplicate_required_property() -> None:
    with pytest.raises(ConfigurationError, match="listed twice"):
        object_schema({"field": string_schema()}, required=["field", "field"])


def test_object_schema_rejects_non_schema_property() -> None:
    with pytest.raises(ConfigurationError, match="Property 'field' must be a schema"):
        object_schema({"field": {"type": "string"}})  # type: ignore[dict-item]


def test_object_schema_rejects_non_boolean_additional_properties() -> None:
    with pytest.raises(ConfigurationError, match="additional_properties must be a boolean"):
        object_schema({}, additional_properties="no")  # type: ignore[arg-type]


def test_object_schema_properties_are_read_only() -> None:
    source = {"field": string_schema()}
    schema = object_schema(source)
    source["other"] = string_schema()

    assert list(schema.properties) == ["field"]
    with pytest.raises(TypeError):
        schema.properties["other"] = string_schema()  # type: ignore[index]


@pytest.mark.parametrize("value", ["hello", 42, 1.5, True, None])
def test_const_schema_accepts_scalars(value: object) -> None:
    assert const_schema(value).value == value  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "value",
    [{"a": 1}, [1, 2], ("a",), float("nan"), float("inf"), float("-inf"), b"bytes"],
)
def test_const_schema_rejects_non_scalars(value: object) -> None:
    with pytest.raises(ConfigurationError):
        const_schema(value)  # type: ignore[arg-type]


def test_schema_values_are_immutable() -> None:
    schema = ConstSchema(value="hello")

    with pytest.raises(AttributeError):
        schema.value = "other"  # type: ignore[misc]


@pytest.mark.parametrize("name", [1, None, ["field"], {"x": 1}])
def test_object_schema_rejects_non_string_required_names(name: object) -> None:
    with pytest.raises(ConfigurationError, match="Required property names must be strings"):
        object_schema({"field": string_schema()}, required=[name])  # type: ignore[list-item]


def _nested_schema() -> ObjectSchema:
    return object_schema(
        {
            "kind": const_schema("order"),
            "customer": object_schema(
                {"name": string_schema(["a", "b"])}, required=["name"], additional_properties=False
            ),
        },
        required=["kind"],
    )


def test_nested_schemas_are_hashable_value_objects() -> None:
    index = {_nested_schema(): "order"}

    assert index[_nested_schema()] == "order"
    assert len({_nested_schema(), _nested_schema(), string_schema()}) == 2


def _pickle_round_trip(value: object) -> object:
    return pickle.loads(pickle.dumps(value))


@pytest.mark.parametrize("clone", [copy.deepcopy, _pickle_round_trip])
def test_nested_schemas_survive_copy_and_pickle(clone) -> None:
    schema = _nested_schema()
    cloned = clone(schema)

    assert cloned == schema
    assert hash(cloned) == hash(schema)


def test_property_order_is_part_of_object_identity() -> None:
    first = object_schema({"a": string_schema(), "b": string_schema()})
    second = object_schema({"b": string_schema(), "a": string_schema()})

    assert first != second


@pytest.mark.parametrize(
    ("left", "right"),
    [(1, True), (0, False), (1, 1.0), ("1", 1), (None, False)],
)
def test_const_schemas_with_differently_typed_values_differ(left: object, right: object) -> None:
    left_schema = const_schema(left)  # type: ignore[arg-type]
    right_schema = const_schema(right)  # type: ignore[arg-type]

    assert left_schema != right_schema
    assert len({left_schema, right_schema}) == 2


def test_const_schemas_with_same_value_are_equal() -> None:
    assert const_schema(True) == const_schema(True)
    assert hash(const_schema(2.5)) == hash(const_schema(2.5))
