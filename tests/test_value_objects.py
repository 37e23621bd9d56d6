"""Unit tests for the Handle value object and the error type."""

import pytest

from github_explorer.domain.exceptions import ErrorKind, GitHubApiError
from github_explorer.domain.value_objects import EMPTY_HANDLE_MESSAGE, Handle


def test_handle_is_trimmed() -> None:
    assert Handle.from_string("  octocat \n").login == "octocat"


@pytest.mark.parametrize("raw", ["", "   ", "\t"])
def test_blank_handle_is_rejected(raw) -> None:
    """Test that blank handles fail locally with an UNKNOWN error."""
    with pytest.raises(GitHubApiError) as exc_info:
        Handle.from_string(raw)

    assert exc_info.value.kind is ErrorKind.UNKNOWN
    assert exc_info.value.status is None
    assert exc_info.value.message == EMPTY_HANDLE_MESSAGE


@pytest.mark.parametrize(
    ("kind", "expected"),
    [
        (ErrorKind.USER_NOT_FOUND, "User not found. Please check the username and try again."),
        (ErrorKind.RATE_LIMIT, "GitHub API rate limit exceeded. Please try again later."),
        (ErrorKind.NETWORK, "Network error while contacting GitHub. Please retry."),
        (ErrorKind.UNKNOWN, "raw message"),
    ],
)
def test_display_message_per_kind(kind, expected) -> None:
    """Test the fixed user-facing message for each error kind."""
    assert GitHubApiError("raw message", kind).display_message == expected
