"""Tests for environment-driven settings."""
from moveframe_engine.config import Settings


class TestSettings:
    """Settings read from the environment at construction."""

    def test_defaults(self, monkeypatch):
        for name in ("ENVIRONMENT", "LOG_LEVEL", "CORS_ORIGINS", "SPORT_ICON_TYPE", "DEFAULT_PAUSE_STATIONS"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings()
        assert settings.ENVIRONMENT == "development"
        assert settings.LOG_LEVEL == "INFO"
        assert settings.CORS_ORIGINS == ["http://localhost:3000", "http://localhost:3001"]
        assert settings.SPORT_ICON_TYPE == "emoji"
        assert settings.DEFAULT_PAUSE_STATIONS == '10"'

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "Production")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example,")
        monkeypatch.setenv("SPORT_ICON_TYPE", "icon")
        settings = Settings()
        assert settings.ENVIRONMENT == "production"
        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.CORS_ORIGINS == ["https://a.example", "https://b.example"]
        assert settings.SPORT_ICON_TYPE == "icon"

    def test_invalid_values_fall_back(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "qa")
        monkeypatch.setenv("SPORT_ICON_TYPE", "sprites")
        settings = Settings()
        assert settings.ENVIRONMENT == "development"
        assert settings.SPORT_ICON_TYPE == "emoji"
