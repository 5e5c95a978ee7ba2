"""Pydantic request / response DTOs for the API boundary."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    """A single ``{role, content}`` turn in a completion request."""

    role: Literal["user", "assistant"]
    content: str


class CompletionRequest(BaseModel):
    """Body of ``POST /api/chat`` when strict schema checking is enabled.

    Unknown keys are allowed and forwarded; only the core fields are checked.
    """

    model_config = ConfigDict(extra="allow")

    model: str = Field(min_length=1)
    messages: list[ChatMessage] = Field(min_length=1)
    max_tokens: int = Field(gt=0)
    temperature: float = Field(default=1.0, ge=0.0, le=1.0)


class ScriptRequest(BaseModel):
    """Request body for ``POST /api/scripts``."""

    style: str
    num_players: int = 2
    plot: str = ""


class ScriptResponse(BaseModel):
    """Successful response from ``POST /api/scripts``."""

    script: str
    model: str | None = None


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    error: str
