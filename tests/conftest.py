"""Shared test fixtures for ghrepo."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from ghrepo.config import Config
from ghrepo.github.client import GitHubClient
from ghrepo.github.errors import Presence
from ghrepo.handlers import RepositoryHandler
from ghrepo.models import ResourceModel


@pytest.fixture
def model() -> ResourceModel:
    return ResourceModel(Owner="alice", Name="demo", GitHubAccess="ghp_test")


@pytest.fixture
def repo_data() -> dict:
    """A trimmed GET /repos/{owner}/{repo} response."""
    return {
        "name": "demo",
        "full_name": "alice/demo",
        "owner": {"login": "alice", "type": "User"},
        "git_url": "git://github.com/alice/demo.git",
        "html_url": "https://github.com/alice/demo",
        "default_branch": "main",
        "language": "Python",
        "forks_count": 3,
        "stargazers_count": 12,
        "watchers_count": 12,
        "subscribers_count": 4,
        "open_issues_count": 5,
    }


@pytest.fixture
def client(repo_data: dict) -> MagicMock:
    """GitHubClient stand-in: repository absent, every call returns repo_data."""
    client = MagicMock(spec=GitHubClient)
    client.probe.return_value = Presence.ABSENT
    client.get_repo.return_value = repo_data
    client.create_repo.return_value = repo_data
    client.update_repo.return_value = repo_data
    client.delete_repo.return_value = {}
    return client


@pytest.fixture
def client_factory(client: MagicMock) -> MagicMock:
    return MagicMock(return_value=client)


@pytest.fixture
def handler(client_factory: MagicMock) -> RepositoryHandler:
    return RepositoryHandler(config=Config(), client_factory=client_factory)
