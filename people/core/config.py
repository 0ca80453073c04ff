"""
Configuration management for the people registry.

This module centralizes environment-driven configuration using Pydantic's
`BaseSettings`. Components accept an explicit `Settings` instance and fall back
to the shared `settings` object when none is given.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Registry configuration sourced from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    # Business rules
    ENFORCE_UNIQUE_EMAIL_ON_UPDATE: bool = True

    @field_validator("LOG_LEVEL", mode="before")
    def _normalize_level(cls, value: str) -> str:
        if isinstance(value, str):
            return value.strip().upper()
        return value


@lru_cache()
def get_settings() -> Settings:
    """Return a cached `Settings` instance."""

    return Settings()


# Singleton-style settings instance for modules that prefer direct access.
settings = get_settings()
