"""Tests for ghrepo.models."""

from __future__ import annotations

from ghrepo.models import TYPE_NAME, ResourceModel, SecurityAndAnalysis


class TestResourceModel:
    def test_defaults(self):
        model = ResourceModel()
        assert model.Name is None
        assert model.SecurityAndAnalysis is None
        assert model.ForksCount is None

    def test_type_name(self):
        assert TYPE_NAME == "GitHub::Repositories::Repository"

    def test_repo_owner_prefers_owner(self):
        model = ResourceModel(Org="acme", Owner="alice", Name="demo")
        assert model.repo_owner() == "alice"

    def test_repo_owner_falls_back_to_org(self):
        model = ResourceModel(Org="acme", Name="demo")
        assert model.repo_owner() == "acme"

    def test_repo_owner_unresolved(self):
        assert ResourceModel(Name="demo").repo_owner() is None


class TestDeserialize:
    def test_empty_payload(self):
        assert ResourceModel._deserialize(None) is None
        assert ResourceModel._deserialize({}) is None

    def test_recasts_template_strings(self):
        model = ResourceModel._deserialize({
            "Org": "acme",
            "Name": "demo",
            "GitHubAccess": "ghp_test",
            "Private": "true",
            "HasWiki": "false",
            "TeamId": "42",
        })
        assert model.Org == "acme"
        assert model.Name == "demo"
        assert model.Private is True
        assert model.HasWiki is False
        assert model.TeamId == 42

    def test_nested_security_and_analysis(self):
        model = ResourceModel._deserialize({
            "Name": "demo",
            "SecurityAndAnalysis": {
                "AdvancedSecurity": "enabled",
                "SecretScanning": "disabled",
            },
        })
        assert model.SecurityAndAnalysis == SecurityAndAnalysis(
            AdvancedSecurity="enabled", SecretScanning="disabled"
        )

    def test_missing_security_and_analysis(self):
        model = ResourceModel._deserialize({"Name": "demo"})
        assert model.SecurityAndAnalysis is None
