import pytest

from specimen.domain import FieldDefinition, TypeDefinition
from specimen.errors import FieldNotFoundError


class SimpleType:
    pass


def test_field_definition_defaults():
    definition = FieldDefinition(SimpleType)

    assert definition.type is SimpleType
    assert definition.name is None
    assert definition.config == {}
    assert definition.overrides == {}
    assert not definition.nullable
    assert not definition.array


def test_field_definition_with_methods_return_new_values():
    original = FieldDefinition(SimpleType)

    updated = (
        original.with_name("MyName")
        .with_overrides({"a": "b"})
        .with_config({"c": "d"})
        .with_nullable()
        .with_array()
    )

    assert updated == FieldDefinition(SimpleType, "MyName", {"c": "d"}, {"a": "b"}, True, True)
    assert original == FieldDefinition(SimpleType)


def test_field_definition_with_name_can_clear_name():
    assert FieldDefinition(SimpleType, "MyName").with_name(None).name is None


def test_field_definition_from_dict():
    definition = FieldDefinition.from_dict(
        {
            "type": SimpleType,
            "name": "MyName",
            "overrides": {"a": "b"},
            "config": {"c": "d"},
            "nullable": True,
            "array": True,
        }
    )

    assert definition == FieldDefinition(SimpleType, "MyName", {"c": "d"}, {"a": "b"}, True, True)


def test_field_definition_from_minimal_dict_uses_defaults():
    assert FieldDefinition.from_dict({"type": SimpleType}) == FieldDefinition(SimpleType)


def test_field_definition_from_dict_requires_type():
    with pytest.raises(ValueError, match="requires a 'type'"):
        FieldDefinition.from_dict({"name": "x"})


def test_field_definition_from_dict_rejects_unknown_keys():
    with pytest.raises(ValueError, match="Unknown field definition keys"):
        FieldDefinition.from_dict({"type": int, "optional": True})


def test_type_definition_defaults():
    definition = TypeDefinition(SimpleType)

    assert definition.type is SimpleType
    assert definition.name is None
    assert not definition.overriding
    assert definition.fields == {}
    assert definition.field_names == []


def test_type_definition_with_all_parameters():
    field1 = FieldDefinition(SimpleType)
    field2 = FieldDefinition(int)

    definition = TypeDefinition(
        SimpleType, "MyProvider", True, {"field1": field1, "field2": field2}
    )

    assert definition.name == "MyProvider"
    assert definition.overriding
    assert definition.get_field("field1") is field1
    assert definition.get_field("field2") is field2


def test_add_field_preserves_insertion_order():
    definition = TypeDefinition(SimpleType)

    for name in ("field3", "field1", "field2"):
        definition.add_field(name, FieldDefinition(int))

    assert definition.field_names == ["field3", "field1", "field2"]


def test_add_field_replaces_field_with_same_name():
    definition = TypeDefinition(SimpleType)
    first = FieldDefinition(int)
    second = FieldDefinition(str)

    definition.add_field("field1", first)
    definition.add_field("field1", second)

    assert definition.field_names == ["field1"]
    assert definition.get_field("field1") is second


def test_get_field_raises_for_missing_field():
    with pytest.raises(FieldNotFoundError, match="Unable to find field by name: missingField"):
        TypeDefinition(SimpleType).get_field("missingField")


def test_type_and_name_are_immutable():
    definition = TypeDefinition(SimpleType)

    with pytest.raises(AttributeError):
        definition.type = int
    with pytest.raises(AttributeError):
        definition.name = "other"


def test_type_definition_from_dict_accepts_mappings_and_definitions():
    email = FieldDefinition(str, "email")

    definition = TypeDefinition.from_dict(
        "user", {"id": {"type": int}, "email": email}, name="v2", overriding=True
    )

    assert definition.type == "user"
    assert definition.name == "v2"
    assert definition.overriding
    assert definition.get_field("id") == FieldDefinition(int)
    assert definition.get_field("email") is email


def test_type_definitions_do_not_share_caller_fields():
    shared = {}
    first = TypeDefinition("first", fields=shared)
    second = TypeDefinition("second", fields=shared)

    first.add_field("x", FieldDefinition(int))

    assert first.field_names == ["x"]
    assert second.field_names == []
    assert shared == {}


def test_field_definition_copies_caller_mappings():
    config = {"min": 1}
    overrides = {"a": "b"}
    definition = FieldDefinition(int, config=config, overrides=overrides)

    config["max"] = 2
    overrides.clear()

    assert definition.config == {"min": 1}
    assert definition.overrides == {"a": "b"}


def test_definitions_are_hashable():
    assert hash(FieldDefinition(int, config={"min": 1})) == hash(FieldDefinition(int))
    assert {FieldDefinition(int, "x"), FieldDefinition(int, "x")} == {FieldDefinition(int, "x")}
    assert hash(TypeDefinition(SimpleType, fields={"a": FieldDefinition(int)})) == hash(
        TypeDefinition(SimpleType)
    )
