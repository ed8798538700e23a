"""Specimen: a registry of providers for building test data.

Tests ask a :class:`~specimen.factory.Specimen` for a value of some type; it
resolves a provider registered for that type (and optional name), hands it
an immutable :class:`~specimen.context.ProviderContext`, and returns the
result. Types without a hand-written provider can be described with a
:class:`~specimen.domain.TypeDefinition`, and are then built field by field,
each field created through the same registry.

Basic Usage:
    >>> from specimen.builders import make_specimen
    >>> from specimen.domain import FieldDefinition, TypeDefinition
    >>>
    >>> specimen = make_specimen()
    >>> specimen.registry.register_type_definition(
    ...     TypeDefinition(User, fields={
    ...         "id": FieldDefinition(int),
    ...         "email": FieldDefinition(str, name="email"),
    ...     })
    ... )
    >>> user = specimen.create(User, overrides={"id": 42})

The package consists of:
    - registry: provider registration and lookup
    - factory: the Specimen facade
    - context: the per-call ProviderContext
    - domain: FieldDefinition and TypeDefinition
    - synthesis: providers built from type definitions
    - bundle: batch registration
    - defaults: Faker-backed providers for built-in types
    - settings: seed and collection size settings
    - errors: package exceptions
"""

from specimen.builders import make_registry, make_specimen
from specimen.context import ProviderContext
from specimen.domain import FieldDefinition, TypeDefinition
from specimen.factory import Specimen
from specimen.registry import ProviderRegistry

__all__ = [
    "FieldDefinition",
    "ProviderContext",
    "ProviderRegistry",
    "Specimen",
    "TypeDefinition",
    "make_registry",
    "make_specimen",
]
