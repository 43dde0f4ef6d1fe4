"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Settings for the meal-food API client, loaded from environment variables."""

    api_base_url: str = "http://localhost:8080"
    api_version_prefix: str = "/api/v1"
    api_token: str | None = None
    request_timeout_seconds: float = 15
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def api_url(self) -> str:
        """Base URL including the version prefix."""
        return join_url(self.api_base_url, self.api_version_prefix)


def join_url(base_url: str, prefix: str) -> str:
    """Join a base URL and a path prefix without doubling slashes."""
    base = base_url.rstrip("/")
    cleaned = prefix.strip("/")
    if not cleaned:
        return base
    return f"{base}/{cleaned}"
