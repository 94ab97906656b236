"""Tests for ghrepo.config."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

from ghrepo.config import DEFAULT_ACTIVITY_LOG, DEFAULT_API_URL, Config

ENV_KEYS = [
    "GHREPO_GITHUB_TOKEN",
    "GHREPO_API_URL",
    "GHREPO_STRICT_PROBE",
    "GHREPO_ACTIVITY_LOG",
]


def _clean_env() -> dict:
    return {k: v for k, v in os.environ.items() if k not in ENV_KEYS}


class TestConfigDefaults:
    def test_default_values(self):
        config = Config()
        assert config.github_token == ""
        assert config.api_url == DEFAULT_API_URL
        assert config.strict_probe is False
        assert config.activity_log_path == DEFAULT_ACTIVITY_LOG


class TestConfigLoad:
    def test_load_from_env(self):
        env = {
            "GHREPO_GITHUB_TOKEN": "ghp_test123",
            "GHREPO_API_URL": "https://ghe.example.com/api/v3",
            "GHREPO_STRICT_PROBE": "true",
            "GHREPO_ACTIVITY_LOG": "/tmp/activity.jsonl",
        }
        with patch.dict(os.environ, env, clear=False):
            config = Config.load()
        assert config.github_token == "ghp_test123"
        assert config.api_url == "https://ghe.example.com/api/v3"
        assert config.strict_probe is True
        assert config.activity_log_path == Path("/tmp/activity.jsonl")

    def test_load_defaults_when_env_empty(self):
        with patch.dict(os.environ, _clean_env(), clear=True):
            config = Config.load()
        assert config.github_token == ""
        assert config.api_url == DEFAULT_API_URL
        assert config.strict_probe is False
        assert config.activity_log_path == DEFAULT_ACTIVITY_LOG

    def test_strict_probe_accepts_common_spellings(self):
        for value, expected in [("1", True), ("YES", True), ("on", True), ("0", False), ("", False)]:
            env = {**_clean_env(), "GHREPO_STRICT_PROBE": value}
            with patch.dict(os.environ, env, clear=True):
                assert Config.load().strict_probe is expected

    def test_blank_api_url_falls_back_to_default(self):
        env = {**_clean_env(), "GHREPO_API_URL": ""}
        with patch.dict(os.environ, env, clear=True):
            assert Config.load().api_url == DEFAULT_API_URL


class TestConfigValidate:
    def test_validate_missing_token(self):
        issues = Config().validate()
        assert len(issues) == 1
        assert "GitHub token" in issues[0]

    def test_validate_all_present(self):
        assert Config(github_token="ghp_xxx").validate() == []

    def test_validate_bad_api_url(self):
        issues = Config(github_token="ghp_xxx", api_url="ghe.example.com").validate()
        assert len(issues) == 1
        assert "API URL" in issues[0]
