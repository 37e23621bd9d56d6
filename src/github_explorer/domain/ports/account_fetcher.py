"""Port: account fetcher — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from github_explorer.domain.entities import Account, QueryResult, Repository


class AccountFetcher(Protocol):
    """Abstract contract for fetching a GitHub account and its repositories."""

    async def fetch_account(self, handle: str) -> Account:
        """Return the profile for *handle*."""
        ...

    async def fetch_repositories(
        self, handle: str, per_page: int = 100, page: int = 1
    ) -> list[Repository]:
        """Return one page of repositories, most recently updated first."""
        ...

    async def fetch_account_with_repositories(self, handle: str) -> QueryResult:
        """Return profile and first page of repositories, or fail as a whole."""
        ...
