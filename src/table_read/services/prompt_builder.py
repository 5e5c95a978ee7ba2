"""Prompt builder — renders the scene-writing instruction from user parameters.

The template is rendered in a single pass over named slots, so text supplied
by the user is inserted literally and never re-scanned for other slots.
"""

from __future__ import annotations

from table_read.domain.entities import GenerationParameters

# ── Prompt template ─────────────────────────────────────────────────────────

SCENE_PROMPT = """\
You are generating a dramatic scene for a table read party game. This should \
be entertaining and engaging, usually hilarious, taking approximately 5 minutes \
to read out loud at a natural pace.

Follow these rules:
1. Write in standard screenplay format
2. Include clear stage directions in parentheses
3. Keep lines natural and performable
4. Make sure each character gets roughly equal speaking time
5. Include moments of both dialogue and action
6. Make it approximately 2-3 pages of script
7. Create distinct personality traits for each character
8. Don't preface the scene with a response to this prompt, just start with the scene.

STYLE: {style}
NUMBER OF CHARACTERS: {num_players}
{plot_clause}

Generate a complete scene that matches these requirements. The scene should \
be self-contained with a clear beginning, middle, and end."""

PLOT_CLAUSE = "PLOT OUTLINE: {plot}"


def render(template: str, **slots: object) -> str:
    """Fill every ``{name}`` slot in *template* with the matching keyword value."""
    return template.format_map({name: str(value) for name, value in slots.items()})


def build(params: GenerationParameters) -> str:
    """Return the complete instruction string for *params*.

    No validation happens here: an empty style still yields a (degenerate)
    prompt and the player count is substituted unchanged.
    """
    plot_clause = render(PLOT_CLAUSE, plot=params.plot) if params.plot else ""
    return render(
        SCENE_PROMPT,
        style=params.style,
        num_players=params.player_count,
        plot_clause=plot_clause,
    )
