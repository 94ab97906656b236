"""Activity logging for local handler invocations.

`ghrepo invoke` appends every handler run to a JSONL file so operators can see
what was sent to GitHub and how it ended. Each line is a JSON object with
timestamp, action, logical id, repository, outcome, and duration. The access
token is never written.

The log file lives in the working directory by default.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from ghrepo.config import Config

MESSAGE_PREVIEW_LIMIT = 500


def _resolve_log_path() -> Path:
    """Log file path from GHREPO_ACTIVITY_LOG, defaulting to the working dir."""
    return Config.load().activity_log_path


def log_invocation(
    action: str,
    logical_id: str | None,
    repository: str,
    status: str,
    error_code: str | None,
    message: str | None,
    duration_ms: int,
    log_path: Path | None = None,
) -> None:
    """Append an invocation entry to the activity log. Never raises."""
    try:
        entry = {
            "timestamp": datetime.now().isoformat(),
            "action": action,
            "logical_id": logical_id,
            "repository": repository,
            "status": status,
            "error_code": error_code,
            "message": message[:MESSAGE_PREVIEW_LIMIT] if message else None,
            "duration_ms": duration_ms,
        }
        path = log_path or _resolve_log_path()
        with open(path, "a") as f:
            f.write(json.dumps(entry, default=str) + "\n")
    except Exception:
        pass  # Never fail an invocation because of the activity log


def read_activity_log(
    limit: int = 20,
    action: str | None = None,
    log_path: Path | None = None,
) -> list[dict]:
    """Read recent activity log entries.

    Returns entries in reverse chronological order (most recent first).
    """
    path = log_path or _resolve_log_path()
    if not path.exists():
        return []

    entries: list[dict] = []
    for line in path.read_text().splitlines():
        if not line.strip():
            continue
        try:
            entry = json.loads(line)
        except json.JSONDecodeError:
            continue

        if not isinstance(entry, dict):
            continue

        if action and (entry.get("action") or "").upper() != action.upper():
            continue

        entries.append(entry)

    entries.reverse()
    return entries[:limit]
