"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.

Dependencies: All config modules
System role: Central configuration aggregator
"""

from functools import lru_cache

from pydantic import Field

from knowledge_store.configs.base import BaseSettings
from knowledge_store.configs.database import DatabaseSettings


class Settings(BaseSettings):
    """Unified settings aggregating all config modules."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get settings singleton.

    Returns Settings instance, cached for the process lifetime.
    Environment variables loaded once at first call.

    Returns:
        Settings: Settings instance

    Usage:
        from knowledge_store.configs import get_settings
        settings = get_settings()
    """
    return Settings()
