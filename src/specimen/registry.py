"""Registration and lookup of providers and type definitions."""

import inspect
import threading
from typing import Any, Callable, Optional, Union

import structlog

from specimen.bundle import register_bundle
from specimen.context import ProviderContext
from specimen.domain import TypeDefinition, TypeKey
from specimen.errors import DuplicateProviderError, ProviderNotFoundError
from specimen.synthesis import DefinitionProvider

__all__ = ["Provider", "ProviderKey", "ProviderRegistry"]

logger = structlog.get_logger(__name__)


Provider = Callable[[ProviderContext], Any]
"""A callable creating one value from a :class:`ProviderContext`."""

ProviderKey = tuple[TypeKey, Optional[str]]
"""Key of an entry in the typed keyspace: the type and an optional name."""


class ProviderRegistry:
    """Registry of providers keyed by type and optional name.

    Two keyspaces are kept apart: typed providers and type definitions live
    under ``(type, name)``, while array providers live under their name
    alone. A name only ever selects the slot registered with exactly that
    name; there is no fallback to the unnamed slot.

    Registration and lookup share one lock, so a registry may be populated
    and used from several threads.

    Example:
        >>> registry = ProviderRegistry()
        >>>
        >>> @registry.provides(User, name="admin")
        >>> def make_admin(context: ProviderContext) -> User:
        ...     return User(id=context.create(int), role="admin")
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._entries: dict[ProviderKey, Union[Provider, TypeDefinition]] = {}
        self._array_providers: dict[str, Provider] = {}

    def register_provider(
        self,
        provider_or_class: Any,
        type_: TypeKey,
        name: Optional[str] = None,
        overriding: bool = False,
    ):
        """Register a provider for ``type_`` under an optional name.

        Args:
            provider_or_class: A callable taking a :class:`ProviderContext`, an
                object with a ``create(context)`` method, or a class of either
                kind, which is instantiated with no arguments.
            type_: The type the provider creates.
            name: Optional name of the slot to register in.
            overriding: Replace an existing entry for the same key.

        Raises:
            DuplicateProviderError: If the key is taken and ``overriding`` is false.
        """
        self._store((type_, name), _as_provider(provider_or_class), overriding)

    def register_type_definition(self, definition: TypeDefinition):
        """Register a type definition under its own type and name.

        Raises:
            DuplicateProviderError: If the key is taken and the definition is
                not marked as overriding.
        """
        self._store((definition.type, definition.name), definition, definition.overriding)

    def register_array_provider(
        self, provider_or_class: Any, name: str, overriding: bool = False
    ):
        """Register a provider in the array keyspace.

        Raises:
            DuplicateProviderError: If the name is taken and ``overriding`` is false.
        """
        provider = _as_provider(provider_or_class)
        with self._lock:
            replaced = name in self._array_providers
            if replaced and not overriding:
                raise DuplicateProviderError(None, name, array=True)
            self._array_providers[name] = provider
        logger.debug(
            "array_provider.overridden" if replaced else "array_provider.registered",
            name=name,
        )

    def register_bundle(self, bundle: Any):
        """Register every provider and type definition of a bundle."""
        register_bundle(self, bundle)

    def resolve(self, type_: TypeKey, name: Optional[str] = None) -> Provider:
        """Return the provider for ``(type_, name)``.

        A registered type definition yields a new :class:`DefinitionProvider`.

        Raises:
            ProviderNotFoundError: If nothing is registered for the key.
        """
        with self._lock:
            try:
                entry = self._entries[(type_, name)]
            except KeyError:
                raise ProviderNotFoundError(type_, name) from None

            if isinstance(entry, TypeDefinition):
                return DefinitionProvider(entry)
            return entry

    def resolve_array(self, name: str) -> Provider:
        """Return the array provider registered under ``name``.

        Raises:
            ProviderNotFoundError: If no array provider has that name.
        """
        with self._lock:
            try:
                return self._array_providers[name]
            except KeyError:
                raise ProviderNotFoundError(None, name, array=True) from None

    def has_provider(self, type_: TypeKey, name: Optional[str] = None) -> bool:
        with self._lock:
            return (type_, name) in self._entries

    def has_array_provider(self, name: str) -> bool:
        with self._lock:
            return name in self._array_providers

    def registered_keys(self) -> list[ProviderKey]:
        with self._lock:
            return list(self._entries)

    def provides(
        self, type_: TypeKey, name: Optional[str] = None, overriding: bool = False
    ) -> Callable:
        """Decorator registering a function or class as a provider of ``type_``.

        The decorated object is returned unchanged.

        Example:
            @registry.provides(str, name="email")
            def make_email(context: ProviderContext) -> str:
                return "someone@example.com"
        """

        def decorator(obj):
            self.register_provider(obj, type_, name, overriding)
            return obj

        return decorator

    def provides_array(self, name: str, overriding: bool = False) -> Callable:
        """Decorator registering a function or class as a named array provider."""

        def decorator(obj):
            self.register_array_provider(obj, name, overriding)
            return obj

        return decorator

    def _store(
        self,
        key: ProviderKey,
        entry: Union[Provider, TypeDefinition],
        overriding: bool,
    ):
        type_, name = key
        with self._lock:
            replaced = key in self._entries
            if replaced and not overriding:
                raise DuplicateProviderError(type_, name)
            self._entries[key] = entry

        kind = "type_definition" if isinstance(entry, TypeDefinition) else "provider"
        logger.debug(
            f"{kind}.overridden" if replaced else f"{kind}.registered",
            type=type_,
            name=name,
        )


def _as_provider(provider_or_class: Any) -> Provider:
    """Normalise the accepted provider forms to a plain callable.

    Raises:
        TypeError: If the argument is neither callable nor has a ``create`` method.
    """
    target = provider_or_class() if inspect.isclass(provider_or_class) else provider_or_class

    create = getattr(target, "create", None)
    if callable(create):
        return create
    if callable(target):
        return target
    raise TypeError(f"{provider_or_class!r} is not a provider")
