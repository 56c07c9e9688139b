"""Unit tests for client settings resolution."""

from __future__ import annotations

import pytest

from resourcemanager.tags.config import (
    DEFAULT_ENDPOINT,
    DEFAULT_TIMEOUT,
    ENV_ACCESS_TOKEN,
    ENV_ENDPOINT,
    ENV_QUOTA_PROJECT,
    ENV_TIMEOUT,
    ClientSettings,
    get_api_path_prefix,
)
from resourcemanager.tags.core import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in (ENV_ENDPOINT, ENV_ACCESS_TOKEN, ENV_QUOTA_PROJECT, ENV_TIMEOUT):
        monkeypatch.delenv(var, raising=False)


class TestClientSettings:
    """Test ClientSettings.from_env precedence and validation."""

    def test_defaults_with_empty_environment(self):
        """Test defaults when nothing is configured."""
        settings = ClientSettings.from_env()
        assert settings.endpoint == DEFAULT_ENDPOINT
        assert settings.access_token is None
        assert settings.quota_project is None
        assert settings.timeout == DEFAULT_TIMEOUT

    def test_environment_values(self, monkeypatch):
        """Test values are read from the environment."""
        monkeypatch.setenv(ENV_ENDPOINT, "https://rm.example.com/")
        monkeypatch.setenv(ENV_ACCESS_TOKEN, "ya29.token")
        monkeypatch.setenv(ENV_QUOTA_PROJECT, "billing-proj")
        monkeypatch.setenv(ENV_TIMEOUT, "12.5")

        settings = ClientSettings.from_env()

        assert settings.endpoint == "https://rm.example.com"
        assert settings.access_token == "ya29.token"
        assert settings.quota_project == "billing-proj"
        assert settings.timeout == 12.5

    def test_explicit_values_win(self, monkeypatch):
        """Test explicit arguments override the environment."""
        monkeypatch.setenv(ENV_ACCESS_TOKEN, "from-env")
        monkeypatch.setenv(ENV_TIMEOUT, "5")

        settings = ClientSettings.from_env(access_token="explicit", timeout=2.0)

        assert settings.access_token == "explicit"
        assert settings.timeout == 2.0

    def test_empty_token_is_unset(self, monkeypatch):
        """Test an empty env token does not produce an Authorization header."""
        monkeypatch.setenv(ENV_ACCESS_TOKEN, "")
        settings = ClientSettings.from_env()
        assert settings.access_token is None
        assert settings.default_headers() == {}

    @pytest.mark.parametrize("raw", ["abc", "0", "-3"])
    def test_invalid_env_timeout(self, monkeypatch, raw):
        """Test a bad timeout in the environment raises ConfigurationError."""
        monkeypatch.setenv(ENV_TIMEOUT, raw)
        with pytest.raises(ConfigurationError, match=ENV_TIMEOUT):
            ClientSettings.from_env()

    def test_invalid_explicit_timeout(self):
        """Test a non-positive explicit timeout is rejected."""
        with pytest.raises(ConfigurationError, match=ENV_TIMEOUT):
            ClientSettings.from_env(timeout=0)

    def test_frozen(self):
        """Test resolved settings cannot be changed."""
        settings = ClientSettings.from_env()
        with pytest.raises(Exception):
            settings.timeout = 1.0

    def test_default_headers(self):
        """Test auth and quota headers are only sent when configured."""
        assert ClientSettings.from_env().default_headers() == {}
        headers = ClientSettings.from_env(access_token="tok", quota_project="p").default_headers()
        assert headers == {"Authorization": "Bearer tok", "x-goog-user-project": "p"}


def test_api_path_prefix():
    """Test versioned path prefix."""
    assert get_api_path_prefix() == "/v3"
    assert get_api_path_prefix("v2") == "/v2"
