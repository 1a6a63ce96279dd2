"""Settings for the assertion helpers."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AssertionSettings(BaseSettings):
    """Configuration shared by all assertion helpers.

    Loads from environment variables automatically:
        TESTKIT_FAIL_FAST, TESTKIT_REPR_MAX_LENGTH, TESTKIT_REPR_MAX_STRING

    Attributes
    ----------
    fail_fast
        Stop a difference assertion at the first mismatching probe. When
        disabled every probe is compared and all mismatches are reported
        together.
    repr_max_length
        Maximum number of container items rendered in diagnostics.
    repr_max_string
        Maximum number of string characters rendered in diagnostics.
    """

    fail_fast: bool = True
    repr_max_length: int | None = Field(default=20, ge=1)
    repr_max_string: int | None = Field(default=80, ge=1)

    model_config = SettingsConfigDict(
        extra="ignore",
        env_prefix="TESTKIT_",
    )


@lru_cache(maxsize=1)
def get_settings() -> AssertionSettings:
    """Return the process-wide settings, read once from the environment."""
    return AssertionSettings()
