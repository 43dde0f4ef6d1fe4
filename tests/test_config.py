"""Tests for application settings."""

import pytest

from food_tier.config import Settings, join_url


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("API_BASE_URL", raising=False)
    monkeypatch.delenv("API_TOKEN", raising=False)
    monkeypatch.delenv("API_VERSION_PREFIX", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)

    settings = Settings(_env_file=None)

    assert settings.api_url == "http://localhost:8080/api/v1"
    assert settings.api_token is None
    assert settings.debug is False


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("API_BASE_URL", "https://meals.example.com/")
    monkeypatch.setenv("API_TOKEN", "secret")
    monkeypatch.setenv("DEBUG", "true")

    settings = Settings(_env_file=None)

    assert settings.api_url == "https://meals.example.com/api/v1"
    assert settings.api_token == "secret"
    assert settings.debug is True


@pytest.mark.parametrize(
    ("base", "prefix", "expected"),
    [
        ("http://x", "/api/v1", "http://x/api/v1"),
        ("http://x/", "api/v1/", "http://x/api/v1"),
        ("http://x/", "", "http://x"),
    ],
)
def test_join_url(base: str, prefix: str, expected: str) -> None:
    assert join_url(base, prefix) == expected
