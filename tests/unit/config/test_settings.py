"""Unit tests for Settings."""

import logging
from datetime import timedelta

import pytest
from pydantic import ValidationError

from passgate_config import Settings, clear_settings_cache, get_settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Drop variables a developer shell may have exported."""
    for name in ("ENV", "TOKEN_TTL", "BCRYPT_ROUNDS", "LOG_LEVEL", "API_PORT"):
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


class TestSettingsDefaults:
    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.env == "local"
        assert settings.token_ttl == timedelta(hours=1)
        assert settings.bcrypt_rounds == 10
        assert settings.api_port == 44044
        assert settings.request_timeout_seconds == 10.0


class TestSettingsFromEnvironment:
    """Tests for environment variable loading."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("3600", timedelta(hours=1)),
            ("PT15M", timedelta(minutes=15)),
        ],
    )
    def test_token_ttl(self, monkeypatch, raw, expected):
        monkeypatch.setenv("TOKEN_TTL", raw)

        assert Settings(_env_file=None).token_ttl == expected

    @pytest.mark.parametrize("raw", ["0", "-60"])
    def test_non_positive_token_ttl_is_rejected(self, monkeypatch, raw):
        monkeypatch.setenv("TOKEN_TTL", raw)

        with pytest.raises(ValidationError, match="token_ttl must be positive"):
            Settings(_env_file=None)

    @pytest.mark.parametrize("rounds", ["3", "32"])
    def test_bcrypt_rounds_bounds(self, monkeypatch, rounds):
        monkeypatch.setenv("BCRYPT_ROUNDS", rounds)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_unknown_env_is_rejected(self, monkeypatch):
        monkeypatch.setenv("ENV", "staging")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_get_settings_is_cached(self, monkeypatch):
        monkeypatch.setenv("API_PORT", "9000")
        first = get_settings()
        monkeypatch.setenv("API_PORT", "9001")

        assert get_settings() is first
        assert get_settings().api_port == 9000

        clear_settings_cache()
        assert get_settings().api_port == 9001


class TestResolvedLogLevel:
    @pytest.mark.parametrize(
        ("env", "level"),
        [
            ("local", logging.DEBUG),
            ("dev", logging.DEBUG),
            ("prod", logging.INFO),
        ],
    )
    def test_level_follows_environment(self, monkeypatch, env, level):
        monkeypatch.setenv("ENV", env)

        assert Settings(_env_file=None).resolved_log_level == level

    def test_explicit_level_wins(self, monkeypatch):
        monkeypatch.setenv("ENV", "prod")
        monkeypatch.setenv("LOG_LEVEL", "warning")

        assert Settings(_env_file=None).resolved_log_level == logging.WARNING
