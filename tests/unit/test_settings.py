"""
Test suite for configuration loading.

System role: Verification of environment-driven settings
"""

import pytest

from knowledge_store.configs import Settings
from knowledge_store.configs.database import DatabaseSettings


class TestDatabaseSettings:
    """Test suite for DatabaseSettings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test defaults when no environment variables are set."""
        # Arrange
        for name in ("CONNECTION_TARGET", "BUSY_TIMEOUT", "ECHO_SQL"):
            monkeypatch.delenv(f"KNOWLEDGE_STORE_{name}", raising=False)

        # Act
        settings = DatabaseSettings(_env_file=None)

        # Assert
        assert settings.connection_target == "knowledge.db"
        assert settings.busy_timeout == 5.0
        assert settings.echo_sql is False

    def test_environment_should_override_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test KNOWLEDGE_STORE_-prefixed variables are read."""
        # Arrange
        monkeypatch.setenv("KNOWLEDGE_STORE_CONNECTION_TARGET", ":memory:")
        monkeypatch.setenv("KNOWLEDGE_STORE_BUSY_TIMEOUT", "1.5")

        # Act
        settings = Settings(_env_file=None)

        # Assert
        assert settings.database.connection_target == ":memory:"
        assert settings.database.busy_timeout == 1.5

    def test_non_positive_busy_timeout_should_be_rejected(self) -> None:
        """Test busy_timeout must be greater than zero."""
        with pytest.raises(ValueError):
            DatabaseSettings(_env_file=None, busy_timeout=0)
