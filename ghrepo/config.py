"""Configuration loading for the GitHub repository resource provider.

Config sources (in priority order):
1. Explicit arguments passed to Config()
2. Environment variables (GHREPO_GITHUB_TOKEN, etc.)
3. .env file in current directory

Handlers always authenticate with the token carried on the resource model.
GHREPO_GITHUB_TOKEN is only a fallback for local CLI invocations.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_ACTIVITY_LOG = Path("ghrepo-activity.jsonl")

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


@dataclass
class Config:
    github_token: str = ""
    api_url: str = DEFAULT_API_URL
    strict_probe: bool = False  # fail instead of proceeding when the probe is inconclusive
    activity_log_path: Path = DEFAULT_ACTIVITY_LOG

    @classmethod
    def load(cls) -> Config:
        return cls(
            github_token=os.getenv("GHREPO_GITHUB_TOKEN", ""),
            api_url=os.getenv("GHREPO_API_URL", DEFAULT_API_URL) or DEFAULT_API_URL,
            strict_probe=_env_flag("GHREPO_STRICT_PROBE"),
            activity_log_path=Path(
                os.getenv("GHREPO_ACTIVITY_LOG", str(DEFAULT_ACTIVITY_LOG))
            ),
        )

    def validate(self) -> list[str]:
        """Return a list of config issues for local invocations."""
        issues = []
        if not self.github_token:
            issues.append("GitHub token not set (GHREPO_GITHUB_TOKEN)")
        if not self.api_url.startswith(("http://", "https://")):
            issues.append(f"API URL is not an http(s) URL (GHREPO_API_URL={self.api_url})")
        return issues
