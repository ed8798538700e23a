"""Faker-backed providers for built-in types.

These are registered explicitly, usually through
:func:`specimen.builders.make_specimen`; nothing is registered globally.
"""

import datetime
import decimal
import uuid
from typing import Optional

from faker import Faker

from specimen.bundle import ProviderBundle, ProviderRegistration
from specimen.context import ProviderContext
from specimen.settings import Settings

__all__ = ["default_bundle"]


class FakerProviders:
    """Providers for primitive types, sharing one Faker instance.

    Numeric providers honour ``min`` and ``max`` config keys; the ``str``
    provider honours ``max_length``.
    """

    def __init__(self, faker: Faker):
        self.faker = faker

    def int_value(self, context: ProviderContext) -> int:
        min_value, max_value = _bounds(context.get_config(), 0, 9999)
        return self.faker.pyint(min_value=min_value, max_value=max_value)

    def float_value(self, context: ProviderContext) -> float:
        config = context.get_config()
        if "min" not in config and "max" not in config:
            return self.faker.pyfloat()
        min_value, max_value = _bounds(config, 0, 9999)
        return self.faker.pyfloat(min_value=min_value, max_value=max_value)

    def str_value(self, context: ProviderContext) -> str:
        return self.faker.pystr(max_chars=context.get_config().get("max_length", 20))

    def bool_value(self, context: ProviderContext) -> bool:
        return self.faker.pybool()

    def date_value(self, context: ProviderContext) -> datetime.date:
        return self.faker.date_object()

    def datetime_value(self, context: ProviderContext) -> datetime.datetime:
        return self.faker.date_time()

    def decimal_value(self, context: ProviderContext) -> decimal.Decimal:
        config = context.get_config()
        return self.faker.pydecimal(
            left_digits=config.get("left_digits"),
            right_digits=config.get("right_digits"),
        )

    def uuid_value(self, context: ProviderContext) -> uuid.UUID:
        return self.faker.uuid4(cast_to=None)

    def email(self, context: ProviderContext) -> str:
        return self.faker.email()

    def name(self, context: ProviderContext) -> str:
        return self.faker.name()

    def text(self, context: ProviderContext) -> str:
        max_length = context.get_config().get("max_length", 200)
        # Faker cannot produce text shorter than five characters
        if max_length < 5:
            return self.faker.pystr(max_chars=max_length)
        return self.faker.text(max_nb_chars=max_length)


def _bounds(config, default_min, default_max) -> tuple:
    """Read ``min`` and ``max`` from config, deriving a missing bound from the other."""
    span = default_max - default_min
    min_value = config.get("min")
    max_value = config.get("max")
    if min_value is None and max_value is None:
        return default_min, default_max
    if max_value is None:
        return min_value, max(min_value, default_min) + span
    if min_value is None:
        return min(max_value, default_min) - span, max_value
    return min_value, max_value


def default_bundle(settings: Optional[Settings] = None) -> ProviderBundle:
    """Return a bundle of providers for ``int``, ``str`` and other built-ins.

    Also includes named ``str`` providers ``email``, ``name`` and ``text``.
    Faker is seeded from ``settings.seed`` when one is set.
    """
    settings = settings or Settings()
    faker = Faker(settings.locale)
    if settings.seed is not None:
        faker.seed_instance(settings.seed)
    providers = FakerProviders(faker)

    return ProviderBundle(
        "defaults",
        providers=[
            ProviderRegistration(providers.int_value, int),
            ProviderRegistration(providers.float_value, float),
            ProviderRegistration(providers.str_value, str),
            ProviderRegistration(providers.bool_value, bool),
            ProviderRegistration(providers.date_value, datetime.date),
            ProviderRegistration(providers.datetime_value, datetime.datetime),
            ProviderRegistration(providers.decimal_value, decimal.Decimal),
            ProviderRegistration(providers.uuid_value, uuid.UUID),
            ProviderRegistration(providers.email, str, "email"),
            ProviderRegistration(providers.name, str, "name"),
            ProviderRegistration(providers.text, str, "text"),
        ],
    )
