"""
Adapter configuration loaded from environment variables.
"""
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Adapter settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # MongoDB
    mongo_uri: str = "mongodb://mongodb:27017"
    auth_db_name: str = "auth_db"

    # Sessions (seconds)
    session_max_age: int = Field(default=30 * 24 * 60 * 60, gt=0)
    session_update_age: int = Field(default=24 * 60 * 60, gt=0)

    # Verification tokens
    secret: str = "CHANGE_ME_IN_PRODUCTION_USE_STRONG_SECRET"
    verification_max_age: int = Field(default=24 * 60 * 60, gt=0)
    base_url: str = "http://localhost:3000"

    # Expiry sweeper
    sweep_interval_minutes: int = Field(default=60, gt=0)

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
