"""Settings controlling value creation, overridable via ``SPECIMEN_*`` variables."""

from typing import Mapping, Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["Settings"]

_ENV_PREFIX = "SPECIMEN_"


class Settings(BaseSettings):
    """Settings for a :class:`~specimen.factory.Specimen` and its default providers.

    Every setting can be overridden by an environment variable with the
    ``SPECIMEN_`` prefix; ``SPECIMEN_SEED=7`` fixes the seed, for example.
    """

    model_config = SettingsConfigDict(
        env_prefix=_ENV_PREFIX, env_ignore_empty=True, frozen=True
    )

    seed: Optional[int] = Field(
        default=None,
        description="Seed for random choices; None for unseeded",
    )

    min_array_size: int = Field(
        default=2,
        ge=0,
        description="Smallest list created for an array field",
    )

    max_array_size: int = Field(
        default=5,
        ge=0,
        description="Largest list created for an array field",
    )

    locale: str = Field(
        default="en_US",
        description="Locale of the default Faker-backed providers",
    )

    @model_validator(mode="after")
    def _check_array_sizes(self) -> "Settings":
        if self.min_array_size > self.max_array_size:
            raise ValueError(
                f"min_array_size {self.min_array_size} exceeds "
                f"max_array_size {self.max_array_size}"
            )
        return self

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Load settings, reading ``SPECIMEN_*`` variables from ``environ``.

        Without ``environ`` the process environment is used. Variables in
        ``environ`` take precedence over the process environment; blank values
        are ignored.

        Raises:
            pydantic.ValidationError: If a value is not an integer, or the
                sizes are inconsistent.
        """
        if environ is None:
            return cls()
        values = {}
        for key, value in environ.items():
            name = key[len(_ENV_PREFIX):].lower()
            if key.startswith(_ENV_PREFIX) and name in cls.model_fields and value.strip():
                values[name] = value
        return cls(**values)
