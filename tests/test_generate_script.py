"""Tests for table_read.services.generate_script."""

from __future__ import annotations

from typing import Any

import pytest

from table_read.domain.entities import GenerationParameters
from table_read.domain.exceptions import TransportError, UpstreamError, UserInputError
from table_read.services.generate_script import GenerateScriptUseCase


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class MockGateway:
    """Minimal CompletionGateway for testing.

    Construct with the payload relay() should return, or pass
    side_effect=SomeException(...) to simulate a failed relay.
    """

    def __init__(self, response: Any = None, side_effect: Exception | None = None) -> None:
        self._response = response
        self._side_effect = side_effect
        self.bodies: list[Any] = []

    async def relay(self, body: Any) -> Any:
        self.bodies.append(body)
        if self._side_effect is not None:
            raise self._side_effect
        return self._response


def _use_case(gateway: MockGateway) -> GenerateScriptUseCase:
    return GenerateScriptUseCase(gateway=gateway, model="claude-3-sonnet-20240229")


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

class TestGenerateScript:

    @pytest.mark.asyncio
    async def test_returns_first_content_block_text(self, upstream_success):
        gateway = MockGateway(response=upstream_success)
        result = await _use_case(gateway).execute(
            GenerationParameters(style="noir detective", player_count=3)
        )
        assert result.script == upstream_success["content"][0]["text"]
        assert result.model == "claude-3-sonnet-20240229"

    @pytest.mark.asyncio
    async def test_packages_single_user_message(self, upstream_success):
        gateway = MockGateway(response=upstream_success)
        await _use_case(gateway).execute(
            GenerationParameters(style="noir detective", player_count=3, plot="a heist")
        )

        body = gateway.bodies[0]
        assert body["model"] == "claude-3-sonnet-20240229"
        assert body["max_tokens"] == 4000
        assert body["temperature"] == 0.7
        assert len(body["messages"]) == 1
        assert body["messages"][0]["role"] == "user"
        assert "STYLE: noir detective" in body["messages"][0]["content"]
        assert "PLOT OUTLINE: a heist" in body["messages"][0]["content"]

    @pytest.mark.asyncio
    async def test_empty_style_rejected_before_relay(self):
        gateway = MockGateway(response={})
        with pytest.raises(UserInputError):
            await _use_case(gateway).execute(GenerationParameters(style=""))
        assert gateway.bodies == []

    @pytest.mark.asyncio
    async def test_upstream_error_propagates(self):
        gateway = MockGateway(side_effect=UpstreamError("overloaded", 529))
        with pytest.raises(UpstreamError) as exc_info:
            await _use_case(gateway).execute(GenerationParameters(style="farce"))
        assert exc_info.value.status_code == 529

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "response",
        [{}, {"content": []}, {"content": [{"type": "tool_use"}]}, {"content": [{"text": 5}]}, None],
    )
    async def test_malformed_response_is_transport_error(self, response):
        gateway = MockGateway(response=response)
        with pytest.raises(TransportError):
            await _use_case(gateway).execute(GenerationParameters(style="farce"))

    def test_completion_request_uses_configured_values(self):
        use_case = GenerateScriptUseCase(
            gateway=MockGateway(), model="claude-3-haiku-20240307", max_tokens=1000, temperature=0.2
        )
        assert use_case.completion_request("hi") == {
            "model": "claude-3-haiku-20240307",
            "messages": [{"role": "user", "content": "hi"}],
            "max_tokens": 1000,
            "temperature": 0.2,
        }
