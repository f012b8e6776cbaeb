"""Tests for Settings loaded from environment variables."""

from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from payment_queries.config import Settings, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Isolate from the developer's environment and any local .env file."""
    for name in ("PAYMENT_QUERIES_TIMEZONE", "PAYMENT_QUERIES_LOG_LEVEL", "PAYMENT_QUERIES_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()


class TestSettingsDefaults:
    def test_defaults(self) -> None:
        settings = Settings()

        assert settings.timezone == "UTC"
        assert settings.log_level == "INFO"
        assert settings.log_json is False
        assert settings.zone == ZoneInfo("UTC")

    def test_log_level_number(self) -> None:
        assert Settings(log_level="debug").log_level_number == 10
        assert Settings(log_level="WARNING").log_level_number == 30


class TestSettingsFromEnvironment:
    def test_reads_prefixed_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PAYMENT_QUERIES_TIMEZONE", "Europe/Warsaw")
        monkeypatch.setenv("PAYMENT_QUERIES_LOG_LEVEL", "debug")
        monkeypatch.setenv("PAYMENT_QUERIES_LOG_JSON", "true")

        settings = Settings()

        assert settings.zone == ZoneInfo("Europe/Warsaw")
        assert settings.log_level == "DEBUG"
        assert settings.log_json is True

    def test_reads_dotenv_file(self, tmp_path) -> None:
        (tmp_path / ".env").write_text("PAYMENT_QUERIES_TIMEZONE=America/New_York\n")

        assert Settings().timezone == "America/New_York"

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()


class TestSettingsValidation:
    def test_rejects_unknown_timezone(self) -> None:
        with pytest.raises(ValidationError, match="Unknown timezone"):
            Settings(timezone="Mars/Olympus_Mons")

    def test_rejects_unknown_log_level(self) -> None:
        with pytest.raises(ValidationError, match="log_level must be one of"):
            Settings(log_level="LOUD")
