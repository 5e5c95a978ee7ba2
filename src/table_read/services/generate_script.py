"""Generate-script use case — prompt → completion request → relay → scene text.

Depends only on the :class:`CompletionGateway` port and the pure prompt
builder.  The interface layer injects the concrete gateway at runtime.
"""

from __future__ import annotations

import logging
from typing import Any

from table_read.domain.entities import GenerationParameters, ScriptResult
from table_read.domain.exceptions import TransportError, UserInputError
from table_read.domain.ports.completion_gateway import CompletionGateway
from table_read.services import prompt_builder

logger = logging.getLogger(__name__)


class GenerateScriptUseCase:
    """Turns generation parameters into a finished scene.

    Parameters
    ----------
    gateway:
        Relay that forwards completion requests to the model provider.
    model:
        Model identifier placed in every completion request.
    max_tokens:
        Upper bound on generated tokens.
    temperature:
        Sampling temperature in ``[0, 1]``.
    """

    def __init__(
        self,
        gateway: CompletionGateway,
        model: str,
        max_tokens: int = 4000,
        temperature: float = 0.7,
    ) -> None:
        self._gateway = gateway
        self._model = model
        self._max_tokens = max_tokens
        self._temperature = temperature

    async def execute(self, params: GenerationParameters) -> ScriptResult:
        """Build the prompt, relay it once and return the generated scene."""
        if not params.style:
            raise UserInputError("Style must not be empty.")

        prompt = prompt_builder.build(params)
        logger.info(
            "Generating scene: %d players, plot=%s", params.player_count, bool(params.plot)
        )

        data = await self._gateway.relay(self.completion_request(prompt))
        return ScriptResult(script=_first_text(data), model=_model_of(data))

    def completion_request(self, prompt: str) -> dict[str, Any]:
        """Package *prompt* as a single-turn chat-completion request body."""
        return {
            "model": self._model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": self._max_tokens,
            "temperature": self._temperature,
        }


def _first_text(data: Any) -> str:
    try:
        text = data["content"][0]["text"]
    except (KeyError, IndexError, TypeError) as exc:
        raise TransportError("Completion response has no text content.") from exc
    if not isinstance(text, str):
        raise TransportError("Completion text is not a string.")
    return text


def _model_of(data: Any) -> str | None:
    model = data.get("model") if isinstance(data, dict) else None
    return model if isinstance(model, str) else None
