"""Providers synthesized from type definitions."""

from typing import Any

from specimen.context import ProviderContext
from specimen.domain import FieldDefinition, TypeDefinition

__all__ = ["DefinitionProvider"]


class DefinitionProvider:
    """Creates values of a type by creating each of its declared fields.

    Each field is created through the context's :class:`Specimen`, so nested
    types resolve against the same registry. A caller override for a field
    is used verbatim instead of creating a value. Overrides naming fields the
    definition does not declare are passed through into the assembled value.

    Fields are read once, when the provider is built; fields added to the
    definition later are picked up by the next provider built from it.

    The assembled value is ``definition.type(**values)`` for class types and
    a plain dict for string-tagged types.
    """

    def __init__(self, definition: TypeDefinition):
        self.definition = definition
        self.fields = list(definition.fields.items())

    def __call__(self, context: ProviderContext) -> Any:
        values = {
            field_name: self._field_value(context, field_name, field)
            for field_name, field in self.fields
        }
        for field_name, value in context.get_overrides().items():
            values.setdefault(field_name, value)

        if isinstance(self.definition.type, type):
            return self.definition.type(**values)
        return values

    def _field_value(
        self, context: ProviderContext, field_name: str, field: FieldDefinition
    ) -> Any:
        if context.has_override(field_name):
            value = context.get_override(field_name)
            if value is None and not field.nullable:
                raise ValueError(f"Field '{field_name}' is not nullable")
            return value

        if field.array:
            return context.create_many(
                field.type,
                context.specimen.collection_size(),
                field.name,
                field.overrides,
                field.config,
            )
        return context.create(field.type, field.name, field.overrides, field.config)

    def __repr__(self):
        return f"DefinitionProvider({self.definition.type!r}, name={self.definition.name!r})"
