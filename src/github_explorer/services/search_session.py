"""Search session — the load state machine behind a search box.

States move ``IDLE → LOADING → SUCCEEDED | FAILED`` on each :meth:`load`.
Every load takes a new generation number; when a load settles after a
newer one has started, its outcome is dropped so that a slow, abandoned
search can never overwrite the result of a later one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from github_explorer.domain.entities import QueryResult, Repository
from github_explorer.domain.exceptions import ErrorKind, GitHubApiError
from github_explorer.domain.ports.account_fetcher import AccountFetcher
from github_explorer.domain.value_objects import Handle
from github_explorer.services.repo_filters import apply_filters, extract_languages

logger = logging.getLogger(__name__)

UNKNOWN_ERROR_MESSAGE = "Unknown error"


class LoadStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class LoadState:
    """Snapshot of a session.  Never holds both a result and an error."""

    status: LoadStatus
    result: QueryResult | None = None
    error: GitHubApiError | None = None


class SearchSession:
    """Holds the most recently settled search for one user of the explorer.

    Parameters
    ----------
    fetcher:
        Adapter used to load an account together with its repositories.
    """

    def __init__(self, fetcher: AccountFetcher) -> None:
        self._fetcher = fetcher
        self._generation = 0
        self._state = LoadState(LoadStatus.IDLE)

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def data(self) -> QueryResult | None:
        return self._state.result

    @property
    def error(self) -> GitHubApiError | None:
        return self._state.error

    @property
    def loading(self) -> bool:
        return self._state.status is LoadStatus.LOADING

    async def load(self, username: str) -> LoadState:
        """Search for *username* and return the session state afterwards."""
        self._generation += 1
        generation = self._generation

        try:
            handle = Handle.from_string(username)
        except GitHubApiError as exc:
            self._state = LoadState(LoadStatus.FAILED, error=exc)
            return self._state

        # The previous result stays visible while loading; the error does not.
        previous = self._state.result
        self._state = LoadState(LoadStatus.LOADING, result=previous)

        settled: LoadState | None = None
        try:
            result = await self._fetcher.fetch_account_with_repositories(handle.login)
            settled = LoadState(LoadStatus.SUCCEEDED, result=result)
        except GitHubApiError as exc:
            settled = LoadState(LoadStatus.FAILED, error=exc)
        except Exception:
            logger.exception("Unexpected failure loading %s", handle)
            settled = LoadState(
                LoadStatus.FAILED, error=GitHubApiError(UNKNOWN_ERROR_MESSAGE, ErrorKind.UNKNOWN)
            )
        finally:
            if generation != self._generation:
                logger.debug("Discarding stale result for %s (generation %d)", handle, generation)
            elif settled is not None:
                self._state = settled
            else:
                # Cancelled before settling: back to what was shown before the load.
                logger.debug("Load of %s cancelled", handle)
                self._state = (
                    LoadState(LoadStatus.SUCCEEDED, result=previous)
                    if previous is not None
                    else LoadState(LoadStatus.IDLE)
                )

        return self._state

    @property
    def languages(self) -> list[str]:
        """Languages present in the current result's repositories."""
        return extract_languages(self._repositories())

    def filter_repositories(self, term: str, language: str | None) -> Sequence[Repository]:
        """Apply the filters to the current result's repositories."""
        return apply_filters(self._repositories(), term, language)

    def _repositories(self) -> Sequence[Repository]:
        if self._state.status is not LoadStatus.SUCCEEDED or self._state.result is None:
            return ()
        return self._state.result.repositories
