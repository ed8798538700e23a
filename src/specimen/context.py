"""Per-call context handed to providers."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping, Optional

from specimen.domain import TypeKey
from specimen.errors import OverrideNotFoundError

if TYPE_CHECKING:
    from specimen.factory import Specimen

__all__ = ["ProviderContext"]


@dataclass(frozen=True)
class ProviderContext:
    """Immutable snapshot of a single creation request.

    Providers read the requested type, overrides and config from the context,
    and use it to create nested values through the same :class:`Specimen`
    that invoked them. Nothing guards against a provider recursively
    creating its own type forever.

    Attributes:
        type: The type being created, or None when an array provider is invoked.
        name: The provider name the caller asked for.
        overrides: Field overrides for the value being created.
        config: Provider-specific configuration.
        specimen: The facade handling the request.
    """

    type: Optional[TypeKey]
    name: Optional[str]
    overrides: Mapping[str, Any]
    config: Mapping[str, Any]
    specimen: "Specimen"

    @classmethod
    def snapshot(
        cls,
        specimen: "Specimen",
        type_: Optional[TypeKey],
        name: Optional[str] = None,
        overrides: Optional[Mapping[str, Any]] = None,
        config: Optional[Mapping[str, Any]] = None,
    ) -> "ProviderContext":
        """Create a context holding read-only copies of the given mappings."""
        return cls(
            type_,
            name,
            MappingProxyType(dict(overrides or {})),
            MappingProxyType(dict(config or {})),
            specimen,
        )

    def get_overrides(self) -> Mapping[str, Any]:
        return self.overrides

    def has_override(self, field: str) -> bool:
        return field in self.overrides

    def get_override(self, field: str) -> Any:
        """Return the override for ``field``.

        Raises:
            OverrideNotFoundError: If the field is not overridden; check with
                :meth:`has_override` first.
        """
        if field not in self.overrides:
            raise OverrideNotFoundError(field)
        return self.overrides[field]

    def get_config(self) -> Mapping[str, Any]:
        return self.config

    def create(
        self,
        type_: TypeKey,
        name: Optional[str] = None,
        overrides: Optional[Mapping[str, Any]] = None,
        config: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        return self.specimen.create(type_, name, overrides, config)

    def create_many(
        self,
        type_: TypeKey,
        count: int,
        name: Optional[str] = None,
        overrides: Optional[Mapping[str, Any]] = None,
        config: Optional[Mapping[str, Any]] = None,
    ) -> list[Any]:
        return self.specimen.create_many(type_, count, name, overrides, config)

    def create_array(
        self,
        name: str,
        overrides: Optional[Mapping[str, Any]] = None,
        config: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        return self.specimen.create_array(name, overrides, config)
