"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from github_explorer.interface.dependencies import shutdown, startup
from github_explorer.interface.error_handlers import register_error_handlers
from github_explorer.interface.routes import router


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage startup / shutdown of shared resources."""
    await startup()
    yield
    await shutdown()


def create_app() -> FastAPI:
    """Build and wire the FastAPI application."""
    app = FastAPI(
        title="GitHub Explorer",
        version="1.0.0",
        description=(
            "Looks up a public GitHub user and returns their profile together "
            "with their most recently updated repositories, filtered by name "
            "and primary language."
        ),
        lifespan=_lifespan,
    )

    register_error_handlers(app)
    app.include_router(router)

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
