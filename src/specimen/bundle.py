"""
Bundles group provider registrations and type definitions so they can be
registered on a :class:`~specimen.registry.ProviderRegistry` in one call.

A bundle is plain data: there is no discovery. Any object exposing
``providers`` and ``type_definitions`` iterables can be registered, and
:class:`ProviderBundle` is the ready-made form.
"""

import inspect
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterable, Optional, Protocol

import structlog

from specimen.domain import TypeDefinition, TypeKey

if TYPE_CHECKING:
    from specimen.registry import ProviderRegistry

__all__ = ["ProviderRegistration", "ProviderBundle", "BundleLike", "register_bundle"]

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ProviderRegistration:
    """One provider entry of a bundle.

    Attributes:
        provider: A provider callable, an object with ``create``, or a class.
        type: The type provided; ignored for array providers.
        name: The provider name; required for array providers.
        overriding: Whether the registration may replace an existing entry.
        array: Whether the provider belongs to the array keyspace.
    """

    provider: Any
    type: Optional[TypeKey] = None
    name: Optional[str] = None
    overriding: bool = False
    array: bool = False

    def __post_init__(self):
        if self.array and self.name is None:
            raise ValueError("Array provider registrations require a name")
        if not self.array and self.type is None:
            raise ValueError("Provider registrations require a type")


class BundleLike(Protocol):
    @property
    def providers(self) -> Iterable[ProviderRegistration]: ...

    @property
    def type_definitions(self) -> Iterable[TypeDefinition]: ...


@dataclass(frozen=True)
class ProviderBundle:
    name: str
    providers: list[ProviderRegistration] = field(default_factory=list)
    type_definitions: list[TypeDefinition] = field(default_factory=list)


def register_bundle(registry: "ProviderRegistry", bundle: Any):
    """Register all providers of a bundle, then all of its type definitions.

    A bundle class is instantiated with no arguments first.

    Raises:
        DuplicateProviderError: On the first registration that collides with
            an existing entry. Entries registered before it are kept.
    """
    if inspect.isclass(bundle):
        bundle = bundle()

    providers = list(bundle.providers)
    type_definitions = list(bundle.type_definitions)

    for registration in providers:
        if registration.array:
            registry.register_array_provider(
                registration.provider, registration.name, registration.overriding
            )
        else:
            registry.register_provider(
                registration.provider,
                registration.type,
                registration.name,
                registration.overriding,
            )

    for definition in type_definitions:
        registry.register_type_definition(definition)

    logger.info(
        "bundle.registered",
        bundle=getattr(bundle, "name", type(bundle).__name__),
        providers=len(providers),
        type_definitions=len(type_definitions),
    )
