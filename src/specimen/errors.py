"""Exceptions raised while registering providers and creating values."""

from typing import Any, Optional

__all__ = [
    "SpecimenError",
    "DuplicateProviderError",
    "ProviderNotFoundError",
    "FieldNotFoundError",
    "OverrideNotFoundError",
    "CreationFailedError",
]


def _label(type_: Any) -> str:
    if isinstance(type_, type):
        return type_.__qualname__
    return str(type_)


def _slot(type_: Any, name: Optional[str], array: bool) -> str:
    if array:
        return f"array provider named {name}"
    if name is None:
        return f"default provider for type {_label(type_)}"
    return f"provider named {name} for type {_label(type_)}"


class SpecimenError(Exception):
    """Base class for all errors raised by this package."""

    pass


class DuplicateProviderError(SpecimenError):
    """Raised when registering to an occupied key without ``overriding``."""

    def __init__(self, type_: Any, name: Optional[str] = None, array: bool = False):
        self.type = type_
        self.name = name
        self.array = array
        super().__init__(
            f"A {_slot(type_, name, array)} is already registered; "
            "register with overriding=True to replace it"
        )


class ProviderNotFoundError(SpecimenError, LookupError):
    """Raised when no provider or type definition is registered for a key."""

    def __init__(self, type_: Any, name: Optional[str] = None, array: bool = False):
        self.type = type_
        self.name = name
        self.array = array
        super().__init__(f"No {_slot(type_, name, array)} is registered")


class FieldNotFoundError(SpecimenError, LookupError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unable to find field by name: {name}")


class OverrideNotFoundError(SpecimenError, LookupError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"No override given for field: {field}")


class CreationFailedError(SpecimenError):
    """Raised when a provider fails while creating a value.

    The failing exception is kept as ``__cause__``.

    Attributes:
        type: The requested type, or None for array providers.
        name: The requested provider name, or None for the default provider.
    """

    def __init__(self, type_: Any, name: Optional[str], message: Optional[str] = None):
        self.type = type_
        self.name = name
        if message is None:
            if name is None:
                message = f"Creation failed for type {_label(type_)} using default provider"
            else:
                message = (
                    f"Creation failed for type {_label(type_)} "
                    f"using provider named {name}"
                )
        super().__init__(message)
