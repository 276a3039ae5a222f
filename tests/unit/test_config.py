"""Tests for application settings."""

from api.config import APP_VERSION, DEVELOPMENT_CORS_ORIGINS, Settings, get_settings
from scripts.start import build_command


def test_defaults() -> None:
    settings = Settings(env="development")

    assert settings.app_version == APP_VERSION
    assert settings.api_port == 3000
    assert settings.rate_limit_requests == 100
    assert settings.rate_limit_window_seconds == 3600
    assert not settings.is_production
    assert not settings.is_test


def test_allowed_origins_by_environment() -> None:
    assert Settings(env="development").allowed_origins == DEVELOPMENT_CORS_ORIGINS
    assert Settings(env="production").allowed_origins == ["https://your-domain.com"]


def test_environment_variables(monkeypatch) -> None:
    monkeypatch.setenv("RATE_LIMIT_REQUESTS", "5")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = Settings()
    assert settings.rate_limit_requests == 5
    assert settings.log_level == "DEBUG"
    assert settings.is_test


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


class TestStartCommand:
    """Tests for the uvicorn launcher command line."""

    def test_uses_server_settings(self, monkeypatch) -> None:
        monkeypatch.delenv("PORT", raising=False)
        settings = Settings(api_host="127.0.0.1", api_port=8080, api_workers=4, log_level="DEBUG")

        command = build_command(settings)

        assert command[:2] == ["uvicorn", "api.main:app"]
        assert command[command.index("--host") + 1] == "127.0.0.1"
        assert command[command.index("--port") + 1] == "8080"
        assert command[command.index("--workers") + 1] == "4"
        assert command[command.index("--log-level") + 1] == "debug"

    def test_platform_port_wins(self, monkeypatch) -> None:
        monkeypatch.setenv("PORT", "9000")

        command = build_command(Settings(api_port=8080))

        assert command[command.index("--port") + 1] == "9000"
