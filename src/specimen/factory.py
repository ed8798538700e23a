"""The :class:`Specimen` facade through which values are created."""

import random
from typing import Any, Mapping, Optional

import structlog

from specimen.context import ProviderContext
from specimen.domain import TypeKey
from specimen.errors import CreationFailedError, ProviderNotFoundError
from specimen.registry import Provider, ProviderRegistry
from specimen.settings import Settings

__all__ = ["Specimen"]

logger = structlog.get_logger(__name__)


class Specimen:
    """Creates values by resolving providers from a registry and invoking them.

    Every call resolves and invokes a provider afresh; nothing is cached.

    Errors raised by a provider are wrapped in :class:`CreationFailedError`
    carrying the requested type and name. A :class:`CreationFailedError` or
    :class:`ProviderNotFoundError` raised further down a chain of nested
    creations passes through unchanged, so the caller sees the innermost
    failure wrapped exactly once.

    Example:
        >>> specimen = Specimen(registry)
        >>> user = specimen.create(User, overrides={"id": 42})
        >>> admins = specimen.create_many(User, 3, name="admin")
    """

    def __init__(self, registry: ProviderRegistry, settings: Optional[Settings] = None):
        self.registry = registry
        self.settings = settings or Settings()
        self._random = random.Random(self.settings.seed)

    def create(
        self,
        type_: TypeKey,
        name: Optional[str] = None,
        overrides: Optional[Mapping[str, Any]] = None,
        config: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Create a value of ``type_`` using the provider registered under ``name``.

        Args:
            type_: The type to create.
            name: Optional provider name; None selects the default provider.
            overrides: Field values to use instead of generated ones.
            config: Provider-specific configuration.

        Returns:
            Whatever the resolved provider returns.

        Raises:
            ProviderNotFoundError: If nothing is registered for the type and name.
            CreationFailedError: If the provider fails.
        """
        context = ProviderContext.snapshot(self, type_, name, overrides, config)
        return self._invoke(
            lambda: self.registry.resolve(type_, name), context, type_, name
        )

    def create_many(
        self,
        type_: TypeKey,
        count: int,
        name: Optional[str] = None,
        overrides: Optional[Mapping[str, Any]] = None,
        config: Optional[Mapping[str, Any]] = None,
    ) -> list[Any]:
        """Create ``count`` independent values of ``type_``.

        Raises:
            ValueError: If ``count`` is negative.
        """
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        return [self.create(type_, name, overrides, config) for _ in range(count)]

    def create_array(
        self,
        name: str,
        overrides: Optional[Mapping[str, Any]] = None,
        config: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Create a value with the array provider registered under ``name``.

        Array providers have their own keyspace; a typed provider registered
        under the same name is never used here.
        """
        context = ProviderContext.snapshot(self, None, name, overrides, config)
        return self._invoke(
            lambda: self.registry.resolve_array(name), context, None, name
        )

    def collection_size(self) -> int:
        """Pick a list length for an array field within the configured range."""
        return self._random.randint(
            self.settings.min_array_size, self.settings.max_array_size
        )

    def _invoke(
        self,
        resolve,
        context: ProviderContext,
        type_: Optional[TypeKey],
        name: Optional[str],
    ) -> Any:
        provider: Provider = resolve()
        try:
            return provider(context)
        except (CreationFailedError, ProviderNotFoundError):
            raise
        except Exception as e:
            logger.debug(
                "specimen.creation_failed",
                type=type_,
                name=name,
                error=str(e),
            )
            if type_ is None:
                raise CreationFailedError(
                    None, name, f"Creation failed for array provider named {name}"
                ) from e
            raise CreationFailedError(type_, name) from e
