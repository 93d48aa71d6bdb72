"""Tests for settings."""

import pytest
from pydantic import ValidationError

from deckcache.config import Settings, get_settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("GH_TOKEN", "REDIS_URL", "ITAD_COUNTRY", "DEFAULT_CACHE_TIME"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.GH_TOKEN is None
        assert settings.REDIS_URL is None
        assert settings.DEFAULT_CACHE_TIME == 600
        assert settings.reports_repo == "DeckSettings/game-reports-steamos"

    def test_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GH_TOKEN", "abc")
        monkeypatch.setenv("ITAD_COUNTRY", "gb")
        monkeypatch.setenv("GRAPHQL_ABORT_ON_PARTIAL_ERRORS", "true")

        settings = Settings(_env_file=None)

        assert settings.GH_TOKEN == "abc"
        assert settings.ITAD_COUNTRY == "GB"
        assert settings.GRAPHQL_ABORT_ON_PARTIAL_ERRORS is True

    @pytest.mark.parametrize("country", ["USA", "1A", ""])
    def test_invalid_country(self, country: str) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, ITAD_COUNTRY=country)

    def test_cache_time_floor(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, DEFAULT_CACHE_TIME=1)

    def test_get_settings_is_cached(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CACHE_KEY_PREFIX", "first")
        first = get_settings()
        monkeypatch.setenv("CACHE_KEY_PREFIX", "second")

        assert get_settings() is first
        assert first.CACHE_KEY_PREFIX == "first"
