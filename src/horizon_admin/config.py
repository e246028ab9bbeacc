"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    base_api_url: str
    base_image_menu: str
    http_timeout_seconds: float = 10
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def join_url(base: str, path: str) -> str:
    """Join a base URL and a resource path with exactly one slash."""
    return f"{base.rstrip('/')}/{path.lstrip('/')}"
