"""FastAPI dependency injection wiring."""

from __future__ import annotations

import httpx
from fastapi import Depends

from table_read.infrastructure.anthropic_gateway import AnthropicGateway
from table_read.infrastructure.config import Settings, get_settings
from table_read.services.generate_script import GenerateScriptUseCase

_http_client: httpx.AsyncClient | None = None


async def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client  # noqa: PLW0603

    settings = get_settings()
    _http_client = httpx.AsyncClient(
        timeout=httpx.Timeout(settings.upstream_timeout_seconds),
        follow_redirects=True,
    )


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client  # noqa: PLW0603

    if _http_client:
        await _http_client.aclose()
        _http_client = None


def get_app_settings() -> Settings:
    return get_settings()


def get_gateway(settings: Settings = Depends(get_app_settings)) -> AnthropicGateway:
    """Build a gateway over the shared HTTP client and process settings."""
    assert _http_client is not None, "startup() was not called"
    return AnthropicGateway(client=_http_client, settings=settings)


def get_use_case(
    gateway: AnthropicGateway = Depends(get_gateway),
    settings: Settings = Depends(get_app_settings),
) -> GenerateScriptUseCase:
    """Build the script use case with the injected gateway."""
    return GenerateScriptUseCase(
        gateway=gateway,
        model=settings.anthropic_model,
        max_tokens=settings.max_tokens,
        temperature=settings.temperature,
    )
