"""Tests for environment-driven client settings."""

import pytest

from artie_client import __version__
from artie_client.shared.settings import DEFAULT_ENDPOINT, ClientSettings, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate each test from the caller's ARTIE_* variables and any .env file."""
    for name in ("ARTIE_ENDPOINT", "ARTIE_API_KEY", "ARTIE_TIMEOUT_SECONDS", "ARTIE_VERSION"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestClientSettings:
    """Test suite for ClientSettings."""

    def test_defaults(self):
        settings = ClientSettings()

        assert settings.endpoint == DEFAULT_ENDPOINT
        assert settings.api_key.get_secret_value() == ""
        assert settings.timeout_seconds == 30.0
        assert settings.version == __version__

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("ARTIE_ENDPOINT", "https://staging.example.com")
        monkeypatch.setenv("ARTIE_API_KEY", "arsk_from_env")
        monkeypatch.setenv("ARTIE_TIMEOUT_SECONDS", "12.5")

        settings = ClientSettings()

        assert settings.endpoint == "https://staging.example.com"
        assert settings.api_key.get_secret_value() == "arsk_from_env"
        assert settings.timeout_seconds == 12.5

    def test_api_key_is_masked(self, monkeypatch):
        monkeypatch.setenv("ARTIE_API_KEY", "arsk_secret")
        assert "arsk_secret" not in repr(ClientSettings())

    def test_reads_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("ARTIE_API_KEY=arsk_dotenv\n")
        assert ClientSettings().api_key.get_secret_value() == "arsk_dotenv"

    def test_get_settings_is_cached(self, monkeypatch):
        monkeypatch.setenv("ARTIE_API_KEY", "arsk_first")
        first = get_settings()
        monkeypatch.setenv("ARTIE_API_KEY", "arsk_second")

        assert get_settings() is first

        get_settings.cache_clear()
        assert get_settings().api_key.get_secret_value() == "arsk_second"
