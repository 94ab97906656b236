"""Resource model for GitHub::Repositories::Repository.

Laid out the way the CloudFormation CLI generates Python models: attribute
names match the schema property names and `_deserialize` recasts the string
values CloudFormation sends into the declared types.
"""

import sys
from dataclasses import dataclass
from inspect import getmembers, isclass
from typing import Any, Mapping, Optional, Type, TypeVar

from cloudformation_cli_python_lib.interface import BaseModel
from cloudformation_cli_python_lib.recast import recast_object

TYPE_NAME = "GitHub::Repositories::Repository"

_SecurityAndAnalysis = TypeVar("_SecurityAndAnalysis", bound="SecurityAndAnalysis")


@dataclass
class SecurityAndAnalysis(BaseModel):
    AdvancedSecurity: Optional[str] = None  # "enabled" | "disabled"
    SecretScanning: Optional[str] = None  # "enabled" | "disabled"

    @classmethod
    def _deserialize(
        cls: Type["_SecurityAndAnalysis"],
        json_data: Optional[Mapping[str, Any]],
    ) -> Optional["_SecurityAndAnalysis"]:
        if not json_data:
            return None
        return cls(
            AdvancedSecurity=json_data.get("AdvancedSecurity"),
            SecretScanning=json_data.get("SecretScanning"),
        )


# work around possible type aliasing issues when variable has same name as a model
_SecurityAndAnalysis = SecurityAndAnalysis

_ResourceModel = TypeVar("_ResourceModel", bound="ResourceModel")


@dataclass
class ResourceModel(BaseModel):
    # Identity and credentials
    Org: Optional[str] = None
    Owner: Optional[str] = None  # also resolved from the API response
    Name: Optional[str] = None
    GitHubAccess: Optional[str] = None

    # Desired configuration
    Private: Optional[bool] = None
    Description: Optional[str] = None
    Homepage: Optional[str] = None
    Visibility: Optional[str] = None  # "public" | "private" | "internal"
    AllowAutoMerge: Optional[bool] = None
    AllowMergeCommit: Optional[bool] = None
    AllowRebaseMerge: Optional[bool] = None
    AllowSquashMerge: Optional[bool] = None
    AutoInit: Optional[bool] = None
    TeamId: Optional[int] = None
    DeleteBranchOnMerge: Optional[bool] = None
    HasIssues: Optional[bool] = None
    HasProjects: Optional[bool] = None
    HasWiki: Optional[bool] = None
    IsTemplate: Optional[bool] = None
    GitIgnoreTemplate: Optional[str] = None
    LicenseTemplate: Optional[str] = None
    AllowForking: Optional[bool] = None
    Archived: Optional[bool] = None
    DefaultBranch: Optional[str] = None
    SecurityAndAnalysis: Optional["_SecurityAndAnalysis"] = None

    # Observed, read-only
    GitUrl: Optional[str] = None
    HtmlUrl: Optional[str] = None
    Language: Optional[str] = None
    ForksCount: Optional[int] = None
    StarsCount: Optional[int] = None
    WatchersCount: Optional[int] = None
    IssuesCount: Optional[int] = None

    @classmethod
    def _deserialize(
        cls: Type["_ResourceModel"],
        json_data: Optional[Mapping[str, Any]],
    ) -> Optional["_ResourceModel"]:
        if not json_data:
            return None
        dataclasses = {n: o for n, o in getmembers(sys.modules[__name__]) if isclass(o)}
        recast_object(cls, json_data, dataclasses)
        return cls(
            Org=json_data.get("Org"),
            Owner=json_data.get("Owner"),
            Name=json_data.get("Name"),
            GitHubAccess=json_data.get("GitHubAccess"),
            Private=json_data.get("Private"),
            Description=json_data.get("Description"),
            Homepage=json_data.get("Homepage"),
            Visibility=json_data.get("Visibility"),
            AllowAutoMerge=json_data.get("AllowAutoMerge"),
            AllowMergeCommit=json_data.get("AllowMergeCommit"),
            AllowRebaseMerge=json_data.get("AllowRebaseMerge"),
            AllowSquashMerge=json_data.get("AllowSquashMerge"),
            AutoInit=json_data.get("AutoInit"),
            TeamId=json_data.get("TeamId"),
            DeleteBranchOnMerge=json_data.get("DeleteBranchOnMerge"),
            HasIssues=json_data.get("HasIssues"),
            HasProjects=json_data.get("HasProjects"),
            HasWiki=json_data.get("HasWiki"),
            IsTemplate=json_data.get("IsTemplate"),
            GitIgnoreTemplate=json_data.get("GitIgnoreTemplate"),
            LicenseTemplate=json_data.get("LicenseTemplate"),
            AllowForking=json_data.get("AllowForking"),
            Archived=json_data.get("Archived"),
            DefaultBranch=json_data.get("DefaultBranch"),
            SecurityAndAnalysis=SecurityAndAnalysis._deserialize(
                json_data.get("SecurityAndAnalysis")
            ),
            GitUrl=json_data.get("GitUrl"),
            HtmlUrl=json_data.get("HtmlUrl"),
            Language=json_data.get("Language"),
            ForksCount=json_data.get("ForksCount"),
            StarsCount=json_data.get("StarsCount"),
            WatchersCount=json_data.get("WatchersCount"),
            IssuesCount=json_data.get("IssuesCount"),
        )

    def repo_owner(self) -> Optional[str]:
        """Login that addresses the repository: the owner, else the organization."""
        return self.Owner or self.Org


# work around possible type aliasing issues when variable has same name as a model
_ResourceModel = ResourceModel
