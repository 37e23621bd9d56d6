"""FastAPI dependency injection wiring."""

from __future__ import annotations

import httpx

from github_explorer.infrastructure.config import get_settings
from github_explorer.infrastructure.github_rest_adapter import GitHubRestAdapter
from github_explorer.services.explore_account import ExploreAccountUseCase

_http_client: httpx.AsyncClient | None = None


async def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client  # noqa: PLW0603

    settings = get_settings()
    _http_client = httpx.AsyncClient(timeout=httpx.Timeout(settings.http_timeout_seconds))


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client  # noqa: PLW0603

    if _http_client:
        await _http_client.aclose()
        _http_client = None


def get_use_case() -> ExploreAccountUseCase:
    """Build the use case with the GitHub adapter injected."""
    assert _http_client is not None, "startup() was not called"

    adapter = GitHubRestAdapter(client=_http_client, base_url=get_settings().github_api_base)
    return ExploreAccountUseCase(fetcher=adapter)
