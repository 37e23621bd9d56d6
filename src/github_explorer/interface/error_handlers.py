"""Global exception handlers — translate domain errors to HTTP responses.

Each error kind maps to a specific HTTP status code and the
``{"status": "error", "kind": "...", "message": "..."}`` envelope.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from github_explorer.domain.exceptions import ErrorKind, GitHubApiError
from github_explorer.domain.value_objects import EMPTY_HANDLE_MESSAGE

logger = logging.getLogger(__name__)

_KIND_STATUS: dict[ErrorKind, int] = {
    ErrorKind.USER_NOT_FOUND: 404,
    ErrorKind.RATE_LIMIT: 429,
    ErrorKind.NETWORK: 502,
    ErrorKind.UNKNOWN: 502,
}


def status_for(exc: GitHubApiError) -> int:
    """HTTP status for a domain error.

    A blank username is a client error; any other ``UNKNOWN`` raised before
    GitHub answered is a server error.
    """
    if exc.kind is ErrorKind.UNKNOWN and exc.status is None:
        return 422 if exc.message == EMPTY_HANDLE_MESSAGE else 500
    return _KIND_STATUS[exc.kind]


def _error_json(status_code: int, message: str, kind: str | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "error", "kind": kind, "message": message},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application."""

    # ── Domain errors ───────────────────────────────────────────────────

    @app.exception_handler(GitHubApiError)
    async def github_handler(request: Request, exc: GitHubApiError) -> JSONResponse:
        logger.warning("%s (status=%s): %s", exc.kind.value, exc.status, exc)
        return _error_json(status_for(exc), exc.display_message, exc.kind.value)

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
        return _error_json(500, "An unexpected error occurred. Please try again later.")
