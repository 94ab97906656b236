"""CLI entry point for running the repository handlers locally."""

from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any

import typer
from cloudformation_cli_python_lib import Action, OperationStatus, ProgressEvent, exceptions
from rich import print as rprint
from rich import print_json
from rich.table import Table

from ghrepo.activity import log_invocation, read_activity_log
from ghrepo.config import Config
from ghrepo.handlers import RepositoryHandler
from ghrepo.models import ResourceModel

app = typer.Typer(help="Run the GitHub::Repositories::Repository handlers locally.")

HANDLER_ERRORS = (
    exceptions.AlreadyExists,
    exceptions.NotFound,
    exceptions.AccessDenied,
    exceptions.InvalidRequest,
    exceptions.InternalFailure,
)

REDACTED = "****"


def _as_template_values(value: Any) -> Any:
    """Render JSON scalars as strings, the way CloudFormation delivers properties."""
    if isinstance(value, dict):
        return {k: _as_template_values(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [_as_template_values(v) for v in value]
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _load_model(model_file: Path) -> ResourceModel:
    try:
        raw = json.loads(model_file.read_text())
    except (OSError, json.JSONDecodeError) as e:
        rprint(f"[red]Could not read model file {model_file}: {e}[/red]")
        raise typer.Exit(code=2)
    if not isinstance(raw, dict):
        rprint(f"[red]Model file {model_file} must contain a JSON object[/red]")
        raise typer.Exit(code=2)

    unknown = sorted(set(raw) - set(ResourceModel.__dataclass_fields__))
    if unknown:
        rprint(f"[red]Unknown property in model: {', '.join(unknown)}[/red]")
        raise typer.Exit(code=2)

    try:
        model = ResourceModel._deserialize(_as_template_values(raw))
    except exceptions.InvalidRequest as e:
        rprint(f"[red]Invalid model: {e}[/red]")
        raise typer.Exit(code=2)
    if model is None:
        rprint("[red]Model file is empty[/red]")
        raise typer.Exit(code=2)
    return model


def _redacted(event: ProgressEvent) -> dict:
    """Serialize a progress event without the access token."""
    payload = dict(event._serialize())
    if "resourceModel" in payload:
        payload["resourceModel"] = _redact_model(payload["resourceModel"])
    if "resourceModels" in payload:
        payload["resourceModels"] = [_redact_model(m) for m in payload["resourceModels"]]
    return payload


def _redact_model(model: Any) -> Any:
    model = dict(model)
    if model.get("GitHubAccess"):
        model["GitHubAccess"] = REDACTED
    return model


@app.command()
def invoke(
    action: str = typer.Argument(help="CREATE, READ, UPDATE, DELETE or LIST"),
    model_file: Path = typer.Argument(help="JSON file with the desired resource state"),
    logical_id: str = typer.Option(
        "LocalRepository", "--logical-id", help="Logical resource id used in errors"
    ),
) -> None:
    """Invoke one handler against the GitHub API and print the progress event."""
    try:
        cfn_action = Action[action.upper()]
    except KeyError:
        rprint(f"[red]Unknown action: {action}[/red]")
        raise typer.Exit(code=2)

    config = Config.load()
    model = _load_model(model_file)
    if not model.GitHubAccess:
        model.GitHubAccess = config.github_token or None

    repository = f"{model.repo_owner() or '?'}/{model.Name}"
    handler = RepositoryHandler(config=config)

    start = time.monotonic()
    try:
        event = handler.invoke(cfn_action, model, logical_id)
    except HANDLER_ERRORS as e:
        event = e.to_progress_event()
    duration_ms = int((time.monotonic() - start) * 1000)

    log_invocation(
        action=cfn_action.name,
        logical_id=logical_id,
        repository=repository,
        status=event.status.name,
        error_code=event.errorCode.name if event.errorCode else None,
        message=event.message,
        duration_ms=duration_ms,
        log_path=config.activity_log_path,
    )

    print_json(data=_redacted(event))
    if event.status != OperationStatus.SUCCESS:
        raise typer.Exit(code=1)


@app.command()
def activity(
    limit: int = typer.Option(20, "--limit", "-n", help="Number of entries to show"),
    action: str = typer.Option(None, "--action", help="Only show this action"),
) -> None:
    """Show recent local invocations."""
    config = Config.load()
    entries = read_activity_log(
        limit=limit, action=action, log_path=config.activity_log_path
    )
    if not entries:
        rprint("No activity recorded yet.")
        return

    table = Table(title="Recent invocations")
    table.add_column("When")
    table.add_column("Action")
    table.add_column("Repository")
    table.add_column("Status")
    table.add_column("Error")
    table.add_column("ms", justify="right")
    for entry in entries:
        table.add_row(
            entry.get("timestamp", "")[:19],
            entry.get("action", ""),
            entry.get("repository", ""),
            entry.get("status", ""),
            entry.get("error_code") or "",
            str(entry.get("duration_ms", "")),
        )
    rprint(table)


@app.command()
def check() -> None:
    """Report configuration problems for local invocations."""
    issues = Config.load().validate()
    if not issues:
        rprint("[green]Configuration OK[/green]")
        return
    for issue in issues:
        rprint(f"[yellow]- {issue}[/yellow]")
    raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
