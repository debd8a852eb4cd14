"""Typed settings configuration - single source of truth."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Storage
    itinerary_backend: Literal["file", "sql", "memory"] = "file"
    itinerary_dir: str = "itinerary"
    database_url: str = "sqlite:///itinerary.db"

    # In-process session cache
    cache_max_entries: int = 256

    # Finalization policy
    lock_after_finalize: bool = False

    # Retention (days); None keeps sessions forever
    session_retention_days: int | None = None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
