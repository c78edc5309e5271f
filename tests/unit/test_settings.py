"""
Unit tests for application settings.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from family_portfolio.settings import Settings


class TestSettings:
    """Test suite for Settings."""

    def test_should_use_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test default values without environment overrides."""
        monkeypatch.delenv("FAMILY_PORTFOLIO_DATA_DIRECTORY", raising=False)
        settings = Settings(_env_file=None)

        assert settings.data_directory == "data"
        assert settings.cache_ttl_seconds == 30
        assert settings.cache_size == 16
        assert settings.log_level == "INFO"

    def test_should_read_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test environment variable overrides."""
        monkeypatch.setenv("FAMILY_PORTFOLIO_DATA_DIRECTORY", "/srv/snapshots")
        monkeypatch.setenv("FAMILY_PORTFOLIO_CACHE_TTL_SECONDS", "5")
        monkeypatch.setenv("FAMILY_PORTFOLIO_LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.data_directory == "/srv/snapshots"
        assert settings.cache_ttl_seconds == 5
        assert settings.log_level == "DEBUG"

    def test_should_reject_unknown_log_level(self) -> None:
        """Test log level validation."""
        with pytest.raises(PydanticValidationError, match="Unsupported log level"):
            Settings(_env_file=None, log_level="chatty")

    def test_should_reject_non_positive_cache_size(self) -> None:
        """Test cache size bounds."""
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, cache_size=0)
