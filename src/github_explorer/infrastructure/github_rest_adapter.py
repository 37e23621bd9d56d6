"""GitHub REST API adapter — implements the AccountFetcher port."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Callable, TypeVar
from urllib.parse import quote

import httpx

from github_explorer.domain.entities import Account, QueryResult, Repository
from github_explorer.domain.exceptions import ErrorKind, GitHubApiError

logger = logging.getLogger(__name__)

_GITHUB_API = "https://api.github.com"
DEFAULT_PER_PAGE = 100

T = TypeVar("T")


class GitHubRestAdapter:
    """Concrete AccountFetcher backed by the GitHub v3 REST API.

    Requests are unauthenticated.  The adapter never retries; every
    failure is classified into a :class:`GitHubApiError` and raised.
    """

    def __init__(self, client: httpx.AsyncClient, base_url: str = _GITHUB_API) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._api_headers: dict[str, str] = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": "github-explorer/1.0",
        }

    async def fetch_account(self, handle: str) -> Account:
        """GET /users/{handle} → Account."""
        resp = await self._api_get(
            f"/users/{_encode(handle)}",
            network_message="Network error while fetching GitHub user",
        )
        return _decode(resp, Account.from_payload)

    async def fetch_repositories(
        self,
        handle: str,
        per_page: int = DEFAULT_PER_PAGE,
        page: int = 1,
    ) -> list[Repository]:
        """GET /users/{handle}/repos → [Repository], most recently updated first.

        Exactly one page is fetched.  GitHub caps *per_page* at 100 on its
        side, so no clamping happens here.
        """
        resp = await self._api_get(
            f"/users/{_encode(handle)}/repos",
            params={
                "sort": "updated",
                "direction": "desc",
                "per_page": str(per_page),
                "page": str(page),
            },
            network_message="Network error while fetching GitHub repositories",
        )
        return _decode(resp, lambda items: [Repository.from_payload(item) for item in items])

    async def fetch_account_with_repositories(self, handle: str) -> QueryResult:
        """Fetch profile and repositories concurrently.

        The first request to fail (in completion order) decides the error;
        the other request is cancelled and its outcome discarded.
        """
        account_task = asyncio.create_task(self.fetch_account(handle))
        repos_task = asyncio.create_task(self.fetch_repositories(handle))
        tasks = {account_task, repos_task}

        try:
            while tasks:
                done, tasks = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
                # Read every exception so none is reported as never retrieved.
                errors = [exc for exc in (task.exception() for task in done) if exc is not None]
                if errors:
                    raise errors[0]
        finally:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)

        return QueryResult(
            account=account_task.result(),
            repositories=tuple(repos_task.result()),
        )

    async def _api_get(
        self,
        endpoint: str,
        *,
        network_message: str,
        params: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Perform a GitHub API GET request with error translation."""
        url = f"{self._base_url}{endpoint}"
        logger.debug("GET %s params=%s", url, params)
        try:
            resp = await self._client.get(url, headers=self._api_headers, params=params)
        except httpx.HTTPError as exc:
            logger.warning("%s: %s", network_message, exc)
            raise GitHubApiError(network_message, ErrorKind.NETWORK) from exc

        if resp.is_success:
            return resp

        error = _classify(resp)
        logger.warning("GitHub API %s for %s: %s", resp.status_code, url, error.kind.value)
        raise error


def _encode(handle: str) -> str:
    return quote(handle, safe="")


def _decode(resp: httpx.Response, build: Callable[[Any], T]) -> T:
    """Decode a 2xx body; a body of the wrong shape is an ``UNKNOWN`` failure."""
    try:
        return build(resp.json())
    except (ValueError, KeyError, TypeError) as exc:
        raise GitHubApiError(
            "Unexpected response from GitHub API", ErrorKind.UNKNOWN, resp.status_code
        ) from exc


def _classify(resp: httpx.Response) -> GitHubApiError:
    if resp.status_code == 404:
        return GitHubApiError("User not found", ErrorKind.USER_NOT_FOUND, resp.status_code)

    if resp.status_code == 403:
        # GitHub signals rate limiting with 403; treated as such unconditionally.
        message = "GitHub API rate limit exceeded"
        reset_raw = resp.headers.get("x-ratelimit-reset", "")
        if reset_raw:
            try:
                reset_str = datetime.fromtimestamp(int(reset_raw), tz=timezone.utc).strftime(
                    "%Y-%m-%d %H:%M:%S UTC"
                )
            except (ValueError, OSError):
                reset_str = reset_raw
            message = f"{message}. Resets at {reset_str}"
        return GitHubApiError(message, ErrorKind.RATE_LIMIT, resp.status_code)

    return GitHubApiError(
        f"GitHub API error: {resp.status_code} {resp.reason_phrase}",
        ErrorKind.UNKNOWN,
        resp.status_code,
    )
