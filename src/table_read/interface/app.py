"""FastAPI application factory for the table-read relay service."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from table_read.interface.dependencies import shutdown, startup
from table_read.interface.error_handlers import register_error_handlers
from table_read.interface.routes import router


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the shared upstream HTTP client for the lifetime of the app."""
    await startup()
    try:
        yield
    finally:
        await shutdown()


def create_app() -> FastAPI:
    """Return an app exposing ``/api/chat``, ``/api/scripts`` and ``/health``.

    Error handlers are registered before the router so every route shares
    the ``{"error": ...}`` envelope.
    """
    app = FastAPI(
        title="Table Read Generator",
        version="1.0.0",
        description=(
            "Generates multi-character screenplay scenes for table-read party "
            "games by relaying templated prompts to a hosted language model."
        ),
        lifespan=_lifespan,
    )

    register_error_handlers(app)
    app.include_router(router)

    # Liveness only; does not contact the model provider.
    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
