"""Application configuration — loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration loaded from env vars (or ``.env`` file).

    Provider credentials are optional here; a missing key or endpoint only
    surfaces when a relay call is attempted.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    anthropic_api_key: SecretStr | None = None
    anthropic_api_endpoint: str | None = None
    anthropic_version: str = "2023-06-01"
    anthropic_model: str = "claude-3-sonnet-20240229"
    max_tokens: int = 4000
    temperature: float = 0.7
    upstream_timeout_seconds: float = 300.0
    strict_request_schema: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton application settings (cached after first call)."""
    return Settings()
