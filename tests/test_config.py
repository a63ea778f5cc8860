"""
Tests for configuration module.
"""

from pathlib import Path

import pytest

from koordinater.core.config import Settings


class TestSettings:
    """Tests for Settings class."""

    def test_default_values(self) -> None:
        """Test that default values are set correctly."""
        settings = Settings()
        assert settings.environment == "development"
        assert settings.json_logs is False
        assert settings.locale == "en"
        assert settings.export_dir == Path("./data/exports")

    def test_effective_log_level_defaults(self) -> None:
        """Test log level defaults per environment."""
        assert Settings(environment="development").effective_log_level == "DEBUG"
        assert Settings(environment="production").effective_log_level == "INFO"

    def test_explicit_log_level(self) -> None:
        """Test explicit log level is normalized."""
        assert Settings(log_level="warning").effective_log_level == "WARNING"

    def test_environment_variables(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Test settings are read from KOORDINATER_ variables."""
        monkeypatch.setenv("KOORDINATER_LOCALE", "sv")
        monkeypatch.setenv("KOORDINATER_JSON_LOGS", "true")
        monkeypatch.setenv("KOORDINATER_EXPORT_DIR", str(tmp_path))
        settings = Settings()
        assert settings.locale == "sv"
        assert settings.json_logs is True
        assert settings.export_dir == tmp_path

    def test_invalid_environment(self) -> None:
        """Test unknown environments are rejected."""
        with pytest.raises(ValueError):
            Settings(environment="testing")
