"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Identity store settings from environment variables (prefix IDENTITY_)."""

    model_config = SettingsConfigDict(
        env_prefix="IDENTITY_",
        env_file=".env",
        extra="ignore",
    )

    # MongoDB
    mongo_uri: str = "mongodb://mongodb:27017"
    database_name: str = "identity_db"
    users_collection: str = "users"
    roles_collection: str = "roles"

    # Unique name indexes are the authoritative duplicate guard
    create_indexes_on_startup: bool = True

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
