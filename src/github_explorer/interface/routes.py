"""API routes — thin controllers that delegate to the use case."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from github_explorer.interface.dependencies import get_use_case
from github_explorer.interface.schemas import ErrorResponse, ExploreResponse
from github_explorer.services.explore_account import ExploreAccountUseCase

router = APIRouter()


@router.get(
    "/users/{username}",
    response_model=ExploreResponse,
    responses={
        404: {"model": ErrorResponse, "description": "GitHub user not found"},
        422: {"model": ErrorResponse, "description": "Blank username"},
        429: {"model": ErrorResponse, "description": "GitHub API rate limit exceeded"},
        502: {"model": ErrorResponse, "description": "GitHub unreachable or failed"},
    },
)
async def explore_user(
    username: str,
    q: str = Query("", description="Case-insensitive substring of the repository name"),
    language: str | None = Query(None, description="Exact primary language"),
    use_case: ExploreAccountUseCase = Depends(get_use_case),
) -> ExploreResponse:
    """Return a GitHub user's profile with their filtered repositories."""
    result = await use_case.execute(username, term=q, language=language)
    return ExploreResponse.model_validate(result)
