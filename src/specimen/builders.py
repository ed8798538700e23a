"""High level entry points for setting up a registry and facade."""

from typing import Iterable, Optional

from specimen.bundle import BundleLike
from specimen.defaults import default_bundle
from specimen.factory import Specimen
from specimen.registry import ProviderRegistry
from specimen.settings import Settings

__all__ = ["make_registry", "make_specimen"]


def make_registry(
    bundles: Iterable[BundleLike] = (),
    with_defaults: bool = False,
    settings: Optional[Settings] = None,
) -> ProviderRegistry:
    """Create a registry populated from the given bundles.

    Args:
        bundles: Bundles registered in order, after the defaults.
        with_defaults: Register the Faker-backed built-in providers first.
        settings: Settings for the default providers.

    Raises:
        DuplicateProviderError: If two bundles register the same key without
            one of them overriding.
    """
    registry = ProviderRegistry()
    if with_defaults:
        registry.register_bundle(default_bundle(settings))
    for bundle in bundles:
        registry.register_bundle(bundle)
    return registry


def make_specimen(
    bundles: Iterable[BundleLike] = (),
    with_defaults: bool = True,
    settings: Optional[Settings] = None,
) -> Specimen:
    """Create a :class:`Specimen` over a fresh registry.

    Each call returns an independent registry, so tests never share
    registrations.

    Example:
        >>> specimen = make_specimen([shop_bundle], settings=Settings(seed=7))
        >>> order = specimen.create(Order)
    """
    settings = settings or Settings()
    return Specimen(make_registry(bundles, with_defaults, settings), settings)
