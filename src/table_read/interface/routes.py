"""API routes — thin controllers that delegate to the gateway and use case."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from table_read.domain.entities import GenerationParameters
from table_read.domain.exceptions import TransportError, UserInputError
from table_read.domain.ports.completion_gateway import CompletionGateway
from table_read.infrastructure.config import Settings
from table_read.interface.dependencies import get_app_settings, get_gateway, get_use_case
from table_read.interface.schemas import (
    CompletionRequest,
    ErrorResponse,
    ScriptRequest,
    ScriptResponse,
)
from table_read.services.generate_script import GenerateScriptUseCase

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Malformed request"},
    500: {"model": ErrorResponse, "description": "Model provider unreachable"},
}


@router.post("/chat", responses=_ERROR_RESPONSES)
async def chat(
    request: Request,
    gateway: CompletionGateway = Depends(get_gateway),
    settings: Settings = Depends(get_app_settings),
) -> JSONResponse:
    """Relay a chat-completion request to the model provider."""
    try:
        body = await request.json()
    except ValueError as exc:
        logger.exception("Chat request body is not valid JSON")
        raise TransportError(f"Unreadable request body: {exc}") from exc

    if settings.strict_request_schema:
        try:
            CompletionRequest.model_validate(body)
        except ValidationError as exc:
            raise UserInputError(
                f"Invalid completion request: {exc.error_count()} validation error(s)."
            ) from exc

    data = await gateway.relay(body)
    return JSONResponse(content=data)


@router.post("/scripts", response_model=ScriptResponse, responses=_ERROR_RESPONSES)
async def generate_script(
    body: ScriptRequest,
    use_case: GenerateScriptUseCase = Depends(get_use_case),
) -> ScriptResponse:
    """Generate a table-read scene from a style, player count and optional plot."""
    result = await use_case.execute(
        GenerationParameters(
            style=body.style, player_count=body.num_players, plot=body.plot
        )
    )
    return ScriptResponse(script=result.script, model=result.model)
