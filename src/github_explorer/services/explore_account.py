"""Explore-account use case — fetch an account and derive its filtered view.

Depends only on the :class:`AccountFetcher` port; loading and filtering go
through a :class:`SearchSession`, so blank input is rejected and results
settle the same way for every caller.  The interface layer injects the
concrete adapter.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from github_explorer.domain.entities import Account, Repository
from github_explorer.domain.ports.account_fetcher import AccountFetcher
from github_explorer.services.search_session import LoadStatus, SearchSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExploreResult:
    """An account with the subset of repositories matching the filters."""

    account: Account
    repositories: list[Repository]
    languages: list[str]
    total_repositories: int


class ExploreAccountUseCase:
    """Fetch ``username`` and apply the search-term / language filters."""

    def __init__(self, fetcher: AccountFetcher) -> None:
        self._session = SearchSession(fetcher)

    async def execute(
        self, username: str, term: str = "", language: str | None = None
    ) -> ExploreResult:
        logger.info("Exploring %r", username)

        state = await self._session.load(username)
        if state.status is LoadStatus.FAILED and state.error is not None:
            raise state.error
        assert state.result is not None, "load settled without a result"

        filtered = self._session.filter_repositories(term, language)
        total = len(state.result.repositories)
        logger.info(
            "%s: %d of %d repositories match (term=%r, language=%r)",
            state.result.account.login,
            len(filtered),
            total,
            term,
            language,
        )

        return ExploreResult(
            account=state.result.account,
            repositories=list(filtered),
            languages=self._session.languages,
            total_repositories=total,
        )
