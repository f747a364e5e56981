"""Unit tests for settings validation."""
import pytest
from pydantic import ValidationError

from roleplay.core.config import Settings, get_settings


@pytest.mark.unit
class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("APP_NAME", "DEBUG", "PORT", "LOG_LEVEL", "JSON_LOGS", "CORS_ORIGINS"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.port == 8011
        assert settings.log_level == "INFO"
        assert settings.json_logs is False

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "9000")
        monkeypatch.setenv("JSON_LOGS", "true")
        settings = Settings(_env_file=None)
        assert settings.port == 9000
        assert settings.json_logs is True

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError, match="LOG_LEVEL must be one of"):
            Settings(_env_file=None, log_level="LOUD")

    def test_invalid_port(self):
        with pytest.raises(ValidationError, match="Configuration errors"):
            Settings(_env_file=None, port=70000)

    def test_settings_are_cached(self):
        assert get_settings() is get_settings()
