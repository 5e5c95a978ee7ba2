"""Global exception handlers — translate domain errors to HTTP responses.

Every failure path returns the ``{"error": "..."}`` envelope.  Upstream
errors keep the provider's status code; transport errors are masked behind
a generic 500 so no internal detail reaches the caller.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from table_read.domain.exceptions import TransportError, UpstreamError, UserInputError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def _error_json(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application."""

    # ── Domain exceptions ───────────────────────────────────────────────

    @app.exception_handler(UserInputError)
    async def user_input_handler(request: Request, exc: UserInputError) -> JSONResponse:
        logger.warning("UserInputError: %s", exc)
        return _error_json(400, str(exc))

    @app.exception_handler(UpstreamError)
    async def upstream_handler(request: Request, exc: UpstreamError) -> JSONResponse:
        return _error_json(exc.status_code, exc.message)

    @app.exception_handler(TransportError)
    async def transport_handler(request: Request, exc: TransportError) -> JSONResponse:
        logger.error("TransportError: %s", exc)
        return _error_json(500, INTERNAL_ERROR_MESSAGE)

    # ── Pydantic / FastAPI validation errors ────────────────────────────

    @app.exception_handler(RequestValidationError)
    async def validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        messages = []
        for err in exc.errors():
            loc = " → ".join(str(p) for p in err.get("loc", []))
            messages.append(f"{loc}: {err.get('msg', 'validation error')}")
        return _error_json(422, "; ".join(messages))

    # ── Catch-all for unexpected errors ─────────────────────────────────

    @app.exception_handler(Exception)
    async def generic_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception")
        return _error_json(500, INTERNAL_ERROR_MESSAGE)
