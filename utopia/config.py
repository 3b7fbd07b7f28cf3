"""Library settings with environment variable support."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime knobs for utopia, read from ``UTOPIA_*`` environment variables."""

    log_level: str = Field(default="WARNING", description="Logging level")
    log_json: bool = Field(default=False, description="Render log events as JSON")
    check_arity: bool = Field(
        default=True,
        description="Reject transforms that cannot be called with one positional argument",
    )

    model_config = SettingsConfigDict(env_prefix="UTOPIA_", case_sensitive=False)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()


def reset_settings() -> None:
    """Drop the cached settings so the next lookup re-reads the environment."""
    get_settings.cache_clear()
