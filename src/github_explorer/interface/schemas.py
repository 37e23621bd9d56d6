"""Pydantic response DTOs for the API boundary."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class AccountSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    login: str
    id: int
    avatar_url: str
    html_url: str
    name: str | None = None
    company: str | None = None
    blog: str | None = None
    location: str | None = None
    bio: str | None = None
    public_repos: int
    followers: int
    following: int
    created_at: str


class RepositorySchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    full_name: str
    html_url: str
    description: str | None = None
    language: str | None = None
    stargazers_count: int
    forks_count: int
    archived: bool
    fork: bool
    updated_at: str


class ExploreResponse(BaseModel):
    """Successful response from ``GET /users/{username}``."""

    model_config = ConfigDict(from_attributes=True)

    account: AccountSchema
    repositories: list[RepositorySchema]
    languages: list[str]
    total_repositories: int


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    kind: str | None = None
    message: str
