"""Thin wrapper around PyGithub for the repository endpoints the handlers use."""

from __future__ import annotations

import logging
from typing import Any

import requests
from github import Auth, Github, GithubException

from ghrepo.config import DEFAULT_API_URL
from ghrepo.github.errors import (
    AccessForbidden,
    GitHubError,
    GitHubRequestFailed,
    GitHubUnavailable,
    Presence,
    RepositoryNotFound,
)

logger = logging.getLogger(__name__)


def _error_messages(data: Any) -> list[str]:
    """Collect `errors[].message` from an error body, else its top-level message."""
    if not isinstance(data, dict):
        return [str(data)] if data else []
    messages = []
    for err in data.get("errors") or []:
        message = err.get("message") if isinstance(err, dict) else str(err)
        if message:
            messages.append(message)
    if not messages and data.get("message"):
        messages.append(data["message"])
    return messages


class GitHubClient:
    """Authenticated GitHub client scoped to a single handler invocation.

    Usage:
        client = GitHubClient(token="ghp_...")
        data = client.get_repo("octocat", "hello-world")  # raw JSON dict
        client.close()

    Every method returns the decoded response body and raises a GitHubError
    subclass on failure.
    """

    def __init__(self, token: str, base_url: str = DEFAULT_API_URL) -> None:
        self._gh = Github(auth=Auth.Token(token), base_url=base_url)

    def get_repo(self, owner: str, name: str) -> dict:
        return self._request("GET", f"/repos/{owner}/{name}", owner=owner, name=name)

    def create_repo(self, payload: dict, org: str | None = None) -> dict:
        """Create under the organization when `org` is given, else for the token's user."""
        url = f"/orgs/{org}/repos" if org else "/user/repos"
        return self._request("POST", url, payload)

    def update_repo(self, owner: str, name: str, payload: dict) -> dict:
        return self._request(
            "PATCH", f"/repos/{owner}/{name}", payload, owner=owner, name=name
        )

    def delete_repo(self, owner: str, name: str) -> dict:
        return self._request("DELETE", f"/repos/{owner}/{name}", owner=owner, name=name)

    def probe(self, owner: str | None, name: str) -> Presence:
        """Best-effort existence check for owner/name."""
        if not owner:
            # Without an owner the repository cannot be addressed at all.
            return Presence.ABSENT
        try:
            self.get_repo(owner, name)
        except RepositoryNotFound:
            return Presence.ABSENT
        except GitHubError as e:
            logger.warning(f"Existence check for {owner}/{name} was inconclusive: {e}")
            return Presence.INDETERMINATE
        return Presence.PRESENT

    def close(self) -> None:
        self._gh.close()

    def _request(
        self,
        verb: str,
        url: str,
        payload: dict | None = None,
        owner: str = "",
        name: str = "",
    ) -> dict:
        try:
            _, data = self._gh.requester.requestJsonAndCheck(verb, url, input=payload)
        except GithubException as e:
            raise self._translate(e, owner, name) from e
        except requests.exceptions.RequestException as e:
            raise GitHubUnavailable(f"{verb} {url} failed: {e}") from e
        return data or {}

    def _translate(self, exc: GithubException, owner: str, name: str) -> GitHubError:
        if exc.status == 404 and name:
            return RepositoryNotFound(owner, name)
        if exc.status == 403:
            return AccessForbidden(_error_messages(exc.data))
        messages = _error_messages(exc.data)
        return GitHubRequestFailed(exc.status, "; ".join(messages) or "no details")
