"""Shared fixtures: upstream JSON bodies and a MockTransport-backed adapter."""

from typing import Any, AsyncIterator, Callable

import httpx
import pytest
import pytest_asyncio

from github_explorer.domain.entities import Repository
from github_explorer.infrastructure.github_rest_adapter import GitHubRestAdapter

Handler = Callable[[httpx.Request], Any]


@pytest.fixture
def user_payload() -> dict[str, Any]:
    """Profile body as returned by GET /users/octocat."""
    return {
        "login": "octocat",
        "id": 1,
        "avatar_url": "https://github.com/images/octocat.png",
        "html_url": "https://github.com/octocat",
        "name": "The Octocat",
        "company": "GitHub",
        "blog": "https://github.blog",
        "location": "San Francisco",
        "bio": "A cat that codes",
        "public_repos": 10,
        "followers": 1000,
        "following": 5,
        "created_at": "2008-01-14T04:33:35Z",
        "type": "User",
    }


@pytest.fixture
def repos_payload() -> list[dict[str, Any]]:
    """Single-item body as returned by GET /users/octocat/repos."""
    return [
        {
            "id": 1,
            "name": "hello-world",
            "full_name": "octocat/hello-world",
            "html_url": "https://github.com/octocat/hello-world",
            "description": "My first repository",
            "language": "JavaScript",
            "stargazers_count": 100,
            "forks_count": 50,
            "archived": False,
            "fork": False,
            "updated_at": "2024-01-01T00:00:00Z",
        }
    ]


def make_repo(repo_id: int, name: str, language: str | None) -> Repository:
    return Repository(
        id=repo_id,
        name=name,
        full_name=f"user/{name}",
        html_url=f"https://github.com/user/{name}",
        description=None,
        language=language,
        stargazers_count=0,
        forks_count=0,
        archived=False,
        fork=False,
        updated_at="2024-01-01T00:00:00Z",
    )


@pytest.fixture
def repos() -> list[Repository]:
    """Two TypeScript react-* repos, one Python repo and one without a language."""
    return [
        make_repo(1, "react-app", "TypeScript"),
        make_repo(2, "python-scripts", "Python"),
        make_repo(3, "react-components", "TypeScript"),
        make_repo(4, "docs", None),
    ]


@pytest_asyncio.fixture
async def adapter_factory() -> AsyncIterator[Callable[[Handler], GitHubRestAdapter]]:
    """Build adapters whose HTTP client answers through *handler*."""
    clients: list[httpx.AsyncClient] = []

    def factory(handler: Handler) -> GitHubRestAdapter:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        clients.append(client)
        return GitHubRestAdapter(client)

    yield factory
    for client in clients:
        await client.aclose()
