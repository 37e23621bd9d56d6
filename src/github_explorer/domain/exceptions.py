"""Domain error type.

Every failure at the GitHub boundary is a :class:`GitHubApiError` tagged
with one :class:`ErrorKind`.  Callers branch on ``exc.kind``; the interface
layer maps each kind to an HTTP status code.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Stable, programmatically matchable failure categories."""

    USER_NOT_FOUND = "USER_NOT_FOUND"
    RATE_LIMIT = "RATE_LIMIT"
    NETWORK = "NETWORK"
    UNKNOWN = "UNKNOWN"


_DISPLAY_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.USER_NOT_FOUND: "User not found. Please check the username and try again.",
    ErrorKind.RATE_LIMIT: "GitHub API rate limit exceeded. Please try again later.",
    ErrorKind.NETWORK: "Network error while contacting GitHub. Please retry.",
}


class GitHubApiError(Exception):
    """A classified failure talking to (or about to talk to) the GitHub API."""

    def __init__(self, message: str, kind: ErrorKind, status: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.status = status

    @property
    def display_message(self) -> str:
        """Fixed user-facing text for the kind; ``UNKNOWN`` falls back to the message."""
        return _DISPLAY_MESSAGES.get(self.kind, self.message)
