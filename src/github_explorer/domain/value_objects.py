"""Value objects — self-validating domain primitives."""

from __future__ import annotations

from dataclasses import dataclass

from github_explorer.domain.exceptions import ErrorKind, GitHubApiError

EMPTY_HANDLE_MESSAGE = "Please enter a GitHub username"


@dataclass(frozen=True, slots=True)
class Handle:
    """A GitHub username, trimmed and guaranteed non-blank.

    Blank input is rejected locally with an ``UNKNOWN`` error so that no
    request is ever issued for an empty query.
    """

    login: str

    @classmethod
    def from_string(cls, raw: str) -> Handle:
        """Strip surrounding whitespace and validate."""
        login = raw.strip()
        if not login:
            raise GitHubApiError(EMPTY_HANDLE_MESSAGE, ErrorKind.UNKNOWN)
        return cls(login=login)

    def __str__(self) -> str:
        return self.login
