"""Repository filtering — pure derivations over a fetched repository list.

None of these functions mutate their input; each returns either the input
itself (when the filter is a no-op) or a new list in the original order.
"""

from __future__ import annotations

from typing import Sequence

from github_explorer.domain.entities import Repository


def filter_by_search_term(repos: Sequence[Repository], term: str) -> Sequence[Repository]:
    """Keep repositories whose name contains *term* (case-insensitive substring)."""
    needle = term.strip().lower()
    if not needle:
        return repos
    return [repo for repo in repos if needle in repo.name.lower()]


def filter_by_language(
    repos: Sequence[Repository], language: str | None
) -> Sequence[Repository]:
    """Keep repositories whose primary language is exactly *language*.

    ``None`` (or an empty string) means "all languages".  Repositories with
    no language never match a concrete language.
    """
    if not language:
        return repos
    return [repo for repo in repos if repo.language == language]


def apply_filters(
    repos: Sequence[Repository], term: str, language: str | None
) -> Sequence[Repository]:
    """Intersect the search-term and language filters, preserving order."""
    return filter_by_language(filter_by_search_term(repos, term), language)


def extract_languages(repos: Sequence[Repository]) -> list[str]:
    """Distinct non-null languages, sorted alphabetically."""
    return sorted({repo.language for repo in repos if repo.language})
