"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True, slots=True)
class Account:
    """A GitHub user profile as returned by ``GET /users/{login}``."""

    login: str
    id: int
    avatar_url: str
    html_url: str
    name: str | None
    company: str | None
    blog: str | None
    location: str | None
    bio: str | None
    public_repos: int
    followers: int
    following: int
    created_at: str

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> Account:
        """Build an account from the decoded JSON body (extra keys ignored)."""
        return cls(
            login=data["login"],
            id=data["id"],
            avatar_url=data["avatar_url"],
            html_url=data["html_url"],
            name=data.get("name"),
            company=data.get("company"),
            blog=data.get("blog"),
            location=data.get("location"),
            bio=data.get("bio"),
            public_repos=data["public_repos"],
            followers=data["followers"],
            following=data["following"],
            created_at=data["created_at"],
        )


@dataclass(frozen=True, slots=True)
class Repository:
    """One repository owned by an account."""

    id: int
    name: str
    full_name: str
    html_url: str
    description: str | None
    language: str | None
    stargazers_count: int
    forks_count: int
    archived: bool
    fork: bool
    updated_at: str

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> Repository:
        return cls(
            id=data["id"],
            name=data["name"],
            full_name=data["full_name"],
            html_url=data["html_url"],
            description=data.get("description"),
            language=data.get("language"),
            stargazers_count=data["stargazers_count"],
            forks_count=data["forks_count"],
            archived=data["archived"],
            fork=data["fork"],
            updated_at=data["updated_at"],
        )


@dataclass(frozen=True, slots=True)
class QueryResult:
    """An account paired with its repositories, from one successful search."""

    account: Account
    repositories: tuple[Repository, ...]
