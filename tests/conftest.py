"""Shared fixtures for all tests."""

from __future__ import annotations

import asyncio
import json
from typing import Any, Callable

import httpx
import pytest
from pydantic import SecretStr

from table_read.infrastructure.anthropic_gateway import AnthropicGateway
from table_read.infrastructure.config import Settings

ENDPOINT = "https://provider.test/v1/messages"


@pytest.fixture
def settings() -> Settings:
    """Settings with fake credentials; never reads the real environment file."""
    return Settings(
        _env_file=None,
        anthropic_api_key=SecretStr("test-key"),
        anthropic_api_endpoint=ENDPOINT,
    )


@pytest.fixture
def completion_body() -> dict[str, Any]:
    return {
        "model": "claude-3-sonnet-20240229",
        "messages": [{"role": "user", "content": "Write a scene."}],
        "max_tokens": 4000,
        "temperature": 0.7,
    }


@pytest.fixture
def upstream_success() -> dict[str, Any]:
    return {
        "id": "msg_01",
        "type": "message",
        "role": "assistant",
        "model": "claude-3-sonnet-20240229",
        "content": [{"type": "text", "text": "INT. ANTIQUE SHOP - NIGHT\n\nALICE: (whispering) Did you hear that?"}],
        "stop_reason": "end_turn",
    }


class RecordingTransport:
    """Builds an ``httpx.MockTransport`` and remembers every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []
        self._handler = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    @property
    def last_body(self) -> Any:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def make_gateway(settings: Settings):
    """Return a factory: handler -> (gateway, recorder).

    Clients follow redirects like the production client and are closed on teardown.
    """
    clients: list[httpx.AsyncClient] = []

    def _make(handler: Callable[[httpx.Request], httpx.Response], cfg: Settings | None = None):
        recorder = RecordingTransport(handler)
        client = httpx.AsyncClient(
            transport=httpx.MockTransport(recorder), follow_redirects=True
        )
        clients.append(client)
        return AnthropicGateway(client=client, settings=cfg or settings), recorder

    yield _make

    for client in clients:
        asyncio.run(client.aclose())
