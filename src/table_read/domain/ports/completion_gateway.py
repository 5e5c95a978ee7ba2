"""Port: completion gateway — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Any, Protocol


class CompletionGateway(Protocol):
    """Abstract contract for relaying a chat-completion request to a model provider."""

    async def relay(self, body: Any) -> Any:
        """Forward *body* verbatim and return the provider's JSON response.

        Raises :class:`UpstreamError` when the provider reports a failure and
        :class:`TransportError` when it cannot be reached or parsed.
        """
        ...
