"""Application configuration loading."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings loaded from ``SAY_HELLO_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SAY_HELLO_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    log_level: str = Field(default="WARNING", description="Package logger level name.")
    color: bool = Field(default=True, description="Colored console logging.")


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()
