"""Unit tests for settings, observability setup and provider selection."""

import logging

import pytest

from algonote.config import ObservabilitySettings, Settings
from algonote.util.di import PersistenceProvider, get_provider
from algonote.util.di.infrastructure import ProdPersistenceProvider
from algonote.util.error import ConfigurationError
from algonote.util.logging import setup_logging
from algonote.util.observability import configure_logfire
from tests.di import MockPersistenceProvider


class TestSettings:
    """Tests for environment-driven settings."""

    def test_nested_env_overrides(self, monkeypatch):
        """Nested values are read with the double-underscore delimiter."""
        monkeypatch.setenv("TAGS__CONFLICT_RETRIES", "5")
        monkeypatch.setenv("DATABASE__URL", "postgresql+asyncpg://u:p@db:5432/x")

        settings = Settings()

        assert settings.tags.conflict_retries == 5
        assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/x"

    def test_retry_budget_must_be_positive(self, monkeypatch):
        """A zero retry budget is rejected."""
        monkeypatch.setenv("TAGS__CONFLICT_RETRIES", "0")

        with pytest.raises(ValueError):
            Settings()


class TestObservability:
    """Tests for logging and Logfire setup."""

    def test_forced_sending_without_token_is_rejected(self):
        """Sending to Logfire requires a token."""
        settings = Settings(
            observability=ObservabilitySettings(send_to_logfire=True, logfire_token=None)
        )

        with pytest.raises(ConfigurationError):
            configure_logfire(settings)

    def test_debug_enables_debug_logging(self):
        """Debug settings lower the application log level."""
        setup_logging(Settings(debug=True))

        assert logging.getLogger("algonote").level == logging.DEBUG


class TestGetProvider:
    """Tests for mock/production provider selection."""

    def test_selects_by_mock_flag(self):
        """Mockable components resolve to the requested implementation."""
        assert get_provider(PersistenceProvider, use_mock=False) is ProdPersistenceProvider
        assert get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider
