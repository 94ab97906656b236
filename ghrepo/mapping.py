"""Translation between ResourceModel and GitHub REST payloads."""

from __future__ import annotations

from typing import Any

from ghrepo.models import ResourceModel

# Model attribute -> request field, shared by create and update bodies.
_COMMON_FIELDS = {
    "Name": "name",
    "Private": "private",
    "Description": "description",
    "Homepage": "homepage",
    "AllowAutoMerge": "allow_auto_merge",
    "AllowMergeCommit": "allow_merge_commit",
    "AllowRebaseMerge": "allow_rebase_merge",
    "AllowSquashMerge": "allow_squash_merge",
    "DeleteBranchOnMerge": "delete_branch_on_merge",
    "HasIssues": "has_issues",
    "HasProjects": "has_projects",
    "HasWiki": "has_wiki",
    "IsTemplate": "is_template",
}

_CREATE_ONLY_FIELDS = {
    "AutoInit": "auto_init",
    "TeamId": "team_id",
    "GitIgnoreTemplate": "gitignore_template",
    "LicenseTemplate": "license_template",
}

_UPDATE_ONLY_FIELDS = {
    "AllowForking": "allow_forking",
    "Archived": "archived",
    "DefaultBranch": "default_branch",
}


def _collect(model: ResourceModel, fields: dict[str, str]) -> dict[str, Any]:
    """Copy set attributes into a request body; unset ones are omitted."""
    body: dict[str, Any] = {}
    for attr, key in fields.items():
        value = getattr(model, attr)
        if value is not None:
            body[key] = value
    return body


def _visibility(model: ResourceModel) -> str:
    if model.Visibility:
        return model.Visibility
    return "private" if model.Private else "public"


def create_payload(model: ResourceModel) -> dict[str, Any]:
    """Body for POST /orgs/{org}/repos or POST /user/repos."""
    body = _collect(model, _COMMON_FIELDS)
    body.update(_collect(model, _CREATE_ONLY_FIELDS))
    body["visibility"] = _visibility(model)
    return body


def update_payload(model: ResourceModel) -> dict[str, Any]:
    """Body for PATCH /repos/{owner}/{repo}.

    `security_and_analysis` is always sent, as `{}` when the model has none.
    """
    body = _collect(model, _COMMON_FIELDS)
    body.update(_collect(model, _UPDATE_ONLY_FIELDS))
    body["visibility"] = _visibility(model)

    security: dict[str, Any] = {}
    if model.SecurityAndAnalysis:
        if model.SecurityAndAnalysis.AdvancedSecurity:
            security["advanced_security"] = {
                "status": model.SecurityAndAnalysis.AdvancedSecurity
            }
        if model.SecurityAndAnalysis.SecretScanning:
            security["secret_scanning"] = {
                "status": model.SecurityAndAnalysis.SecretScanning
            }
    body["security_and_analysis"] = security
    return body


def apply_repo_data(model: ResourceModel, data: dict[str, Any]) -> ResourceModel:
    """Copy the observed attributes of a repository response onto the model."""
    owner = data.get("owner") or {}
    model.Owner = owner.get("login")
    model.GitUrl = data.get("git_url")
    model.HtmlUrl = data.get("html_url")
    model.DefaultBranch = data.get("default_branch")
    model.Language = data.get("language")
    model.ForksCount = data.get("forks_count")
    model.StarsCount = data.get("stargazers_count")
    model.WatchersCount = data.get("subscribers_count")
    model.IssuesCount = data.get("open_issues_count")
    return model
