"""
Database configuration settings.

Manages the SQLite connection target and per-connection engine options
used by every store.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for the stores
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from knowledge_store.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """SQLite database configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="KNOWLEDGE_STORE_",
        case_sensitive=False,
        extra="ignore",
    )

    connection_target: str = Field(
        default="knowledge.db",
        description="Database file path, ':memory:', or a sqlite+aiosqlite URL",
    )
    busy_timeout: float = Field(
        default=5.0,
        gt=0,
        description="Seconds a connection waits on a locked database before failing",
    )
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")
