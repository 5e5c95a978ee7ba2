"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GenerationParameters:
    """User-supplied description of the scene to generate."""

    style: str
    player_count: int = 2
    plot: str = ""


@dataclass(frozen=True, slots=True)
class ScriptResult:
    """The generated scene text returned to the caller."""

    script: str
    model: str | None = None
