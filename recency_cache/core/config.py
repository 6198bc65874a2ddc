"""
Configuration using Pydantic Settings.

Values come from ``RECENCY_CACHE_*`` environment variables or a ``.env`` file.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="RECENCY_CACHE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    log_to_file: bool = False
    logs_dir: str = "logs"

    # Attach logging listeners in the demonstration driver
    log_events: bool = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
