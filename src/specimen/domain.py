"""Declarative descriptions of types that can be synthesized field by field."""

from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional, Union

from specimen.errors import FieldNotFoundError

__all__ = ["TypeKey", "FieldDefinition", "TypeDefinition"]


TypeKey = Union[type, str]
"""Identifier of a creatable type.

Either a Python class or a free-form string tag. Classes are assembled by
calling them with keyword arguments; string tags are assembled as dicts.
"""


_FIELD_KEYS = frozenset({"type", "name", "config", "overrides", "nullable", "array"})


@dataclass(frozen=True)
class FieldDefinition:
    """Describes how to create the value of one field of a synthesized type.

    Attributes:
        type: The type of the field's value.
        name: Optional name selecting a named provider for ``type``.
        config: Provider-specific configuration passed through untouched.
        overrides: Overrides passed through to the provider of the field.
        nullable: Whether ``None`` is an acceptable value for the field.
        array: Whether the field holds a list of ``type`` values.

    Example:
        >>> FieldDefinition(int).with_config({"min": 0, "max": 9}).with_array()
        FieldDefinition(type=<class 'int'>, name=None, config={'min': 0, 'max': 9}, ...)
    """

    type: TypeKey
    name: Optional[str] = None
    config: Mapping[str, Any] = field(default_factory=dict, hash=False)
    overrides: Mapping[str, Any] = field(default_factory=dict, hash=False)
    nullable: bool = False
    array: bool = False

    def __post_init__(self):
        object.__setattr__(self, "config", dict(self.config))
        object.__setattr__(self, "overrides", dict(self.overrides))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FieldDefinition":
        """Build a definition from a mapping with a required ``type`` key.

        Raises:
            ValueError: If ``type`` is missing or an unknown key is present.
        """
        if "type" not in data:
            raise ValueError("Field definition requires a 'type'")
        unknown = set(data) - _FIELD_KEYS
        if unknown:
            raise ValueError(f"Unknown field definition keys {sorted(unknown)}")

        return cls(
            data["type"],
            data.get("name"),
            data.get("config") or {},
            data.get("overrides") or {},
            bool(data.get("nullable", False)),
            bool(data.get("array", False)),
        )

    def with_name(self, name: Optional[str]) -> "FieldDefinition":
        return replace(self, name=name)

    def with_config(self, config: Mapping[str, Any]) -> "FieldDefinition":
        return replace(self, config=config)

    def with_overrides(self, overrides: Mapping[str, Any]) -> "FieldDefinition":
        return replace(self, overrides=overrides)

    def with_nullable(self, nullable: bool = True) -> "FieldDefinition":
        return replace(self, nullable=nullable)

    def with_array(self, array: bool = True) -> "FieldDefinition":
        return replace(self, array=array)


@dataclass(frozen=True)
class TypeDefinition:
    """A field-by-field recipe for a type that has no explicit provider.

    The type, name and overriding flag are fixed at construction; fields may
    be added afterwards, with the last definition for a name winning.

    Attributes:
        type: The type this definition synthesizes.
        name: Optional name; registers the definition in a named slot.
        overriding: Whether registering may replace an existing entry.
        fields: Field definitions by field name, in synthesis order.
    """

    type: TypeKey
    name: Optional[str] = None
    overriding: bool = False
    fields: dict[str, FieldDefinition] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        object.__setattr__(self, "fields", dict(self.fields))

    @classmethod
    def from_dict(
        cls,
        type_: TypeKey,
        fields: Mapping[str, Union[FieldDefinition, Mapping[str, Any]]],
        name: Optional[str] = None,
        overriding: bool = False,
    ) -> "TypeDefinition":
        """Build a definition whose fields may be given as plain mappings.

        Example:
            >>> TypeDefinition.from_dict(
            ...     User, {"id": {"type": int}, "email": {"type": str, "name": "email"}}
            ... )
        """
        return cls(
            type_,
            name,
            overriding,
            {
                field_name: (
                    definition
                    if isinstance(definition, FieldDefinition)
                    else FieldDefinition.from_dict(definition)
                )
                for field_name, definition in fields.items()
            },
        )

    @property
    def field_names(self) -> list[str]:
        return list(self.fields)

    def add_field(self, name: str, definition: FieldDefinition) -> None:
        self.fields[name] = definition

    def get_field(self, name: str) -> FieldDefinition:
        try:
            return self.fields[name]
        except KeyError:
            raise FieldNotFoundError(name) from None
