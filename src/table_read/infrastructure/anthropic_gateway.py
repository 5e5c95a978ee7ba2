"""Anthropic Messages API relay — implements the CompletionGateway port."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from table_read.domain.exceptions import TransportError, UpstreamError
from table_read.infrastructure.config import Settings

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Failed to generate script"


class AnthropicGateway:
    """Concrete ``CompletionGateway`` that forwards request bodies verbatim.

    Credentials and endpoint are read from *settings* on every call, so the
    gateway holds no state of its own between requests.
    """

    def __init__(self, client: httpx.AsyncClient, settings: Settings) -> None:
        self._client = client
        self._settings = settings

    async def relay(self, body: Any) -> Any:
        """POST *body* to the provider and return its JSON response unchanged."""
        try:
            resp = await self._client.post(
                self._endpoint(), headers=self._headers(), json=body
            )
            data = resp.json()
        except TransportError:
            logger.exception("Relay to model provider is misconfigured")
            raise
        except (httpx.HTTPError, ValueError) as exc:
            logger.exception("Relay to model provider failed")
            raise TransportError(f"Model provider call failed: {exc}") from exc

        if resp.is_success:
            logger.info("Model provider answered HTTP %d", resp.status_code)
            return data

        message = _error_message(data)
        logger.warning("Model provider returned HTTP %d: %s", resp.status_code, message)
        raise UpstreamError(message, resp.status_code)

    def _endpoint(self) -> str:
        endpoint = self._settings.anthropic_api_endpoint
        if not endpoint:
            raise TransportError("ANTHROPIC_API_ENDPOINT is not configured.")
        return endpoint

    def _headers(self) -> dict[str, str]:
        api_key = self._settings.anthropic_api_key
        if api_key is None:
            raise TransportError("ANTHROPIC_API_KEY is not configured.")
        return {
            "x-api-key": api_key.get_secret_value(),
            "anthropic-version": self._settings.anthropic_version,
            "content-type": "application/json",
        }


def _error_message(data: Any) -> str:
    """Pull a human-readable message out of a provider error body."""
    if not isinstance(data, dict):
        return DEFAULT_ERROR_MESSAGE
    message = data.get("message")
    if not message and isinstance(data.get("error"), dict):
        message = data["error"].get("message")
    return message if isinstance(message, str) and message else DEFAULT_ERROR_MESSAGE
