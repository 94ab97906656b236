"""Typed failures raised by GitHubClient, plus the existence-probe result."""

from __future__ import annotations

from enum import Enum


class GitHubError(Exception):
    """Base class for every failure surfaced by GitHubClient."""


class RepositoryNotFound(GitHubError):
    """The API answered 404 for the addressed repository."""

    def __init__(self, owner: str, name: str) -> None:
        self.owner = owner
        self.name = name
        super().__init__(f"Repository {owner}/{name} not found")


class AccessForbidden(GitHubError):
    """The API answered 403. `messages` holds the reported error messages."""

    def __init__(self, messages: list[str]) -> None:
        self.messages = messages
        super().__init__("\n".join(messages))


class GitHubRequestFailed(GitHubError):
    """Any other HTTP error status."""

    def __init__(self, status: int, message: str) -> None:
        self.status = status
        super().__init__(f"GitHub API error {status}: {message}")


class GitHubUnavailable(GitHubError):
    """The request never produced an HTTP response (connection, timeout, ...)."""


class Presence(Enum):
    PRESENT = "present"
    ABSENT = "absent"
    INDETERMINATE = "indeterminate"  # probe failed for a reason other than 404
