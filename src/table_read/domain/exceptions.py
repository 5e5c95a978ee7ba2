"""Domain exception hierarchy.

Each exception maps to a specific HTTP status code at the interface layer.
Inner layers raise these; the outermost error-handler translates them.
"""

from __future__ import annotations


class TableReadError(Exception):
    """Base exception for the entire application."""


# ── Input validation ────────────────────────────────────────────────────────


class UserInputError(TableReadError):
    """The caller supplied unusable input (empty style, malformed body)."""


# ── Model provider errors ───────────────────────────────────────────────────


class UpstreamError(TableReadError):
    """The model provider rejected the request.

    The provider's message and status code are surfaced to the caller as-is.
    """

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class TransportError(TableReadError):
    """The provider could not be reached or answered with an unreadable body.

    The detail is for server logs only; callers receive a generic message.
    """
