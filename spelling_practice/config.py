"""Configuration loaded from environment variables and a .env file."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from spelling_practice.word_store import DEFAULT_SLOT, DEFAULT_TEST_SIZE


class Settings(BaseSettings):
    """Application settings.

    Every field can be set through an environment variable prefixed with
    ``SPELLING_`` (for example ``SPELLING_DATA_DIR``) or through a ``.env``
    file in the working directory. Environment variables take precedence.
    """

    model_config = SettingsConfigDict(
        env_prefix="SPELLING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_dir: str = ".spelling_practice/"
    store_slot: str = DEFAULT_SLOT
    test_size: int = Field(default=DEFAULT_TEST_SIZE, ge=1)
    log_file: str | None = None
    log_level: str = "INFO"

    @field_validator("data_dir", "store_slot")
    @classmethod
    def strip_and_require(cls, value: str) -> str:
        value = value.strip()
        if not value:
            msg = "value cannot be empty"
            raise ValueError(msg)
        return value

    @field_validator("log_file")
    @classmethod
    def blank_log_file_is_unset(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            msg = f"unknown log level: {value}"
            raise ValueError(msg)
        return level


@lru_cache
def get_settings() -> Settings:
    """Return the cached application settings."""
    return Settings()
