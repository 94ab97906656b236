"""Lifecycle operations for the GitHub repository resource.

Each operation builds its own GitHubClient from the model's token, performs at
most an existence probe plus one primary call, and either returns a
ProgressEvent or raises a cloudformation_cli_python_lib handler exception.
The CloudFormation runtime lives in ghrepo.resource; nothing here depends on
it, so the operations can be driven directly.
"""

from __future__ import annotations

import logging
from typing import Callable

from cloudformation_cli_python_lib import (
    Action,
    OperationStatus,
    ProgressEvent,
    exceptions,
)

from ghrepo.config import Config
from ghrepo.github.client import GitHubClient
from ghrepo.github.errors import (
    AccessForbidden,
    GitHubError,
    Presence,
    RepositoryNotFound,
)
from ghrepo.mapping import apply_repo_data, create_payload, update_payload
from ghrepo.models import TYPE_NAME, ResourceModel

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str], GitHubClient]


class RepositoryHandler:
    """Maps CloudFormation actions onto GitHub repository API calls."""

    def __init__(
        self,
        config: Config | None = None,
        client_factory: ClientFactory | None = None,
        type_name: str = TYPE_NAME,
    ) -> None:
        self._config = config or Config.load()
        self._client_factory = client_factory or self._default_client
        self.type_name = type_name

    def invoke(
        self, action: Action, model: ResourceModel, logical_id: str | None
    ) -> ProgressEvent:
        operations = {
            Action.CREATE: self.create,
            Action.READ: self.read,
            Action.UPDATE: self.update,
            Action.DELETE: self.delete,
            Action.LIST: self.list,
        }
        if action not in operations:
            raise exceptions.InvalidRequest(f"Unsupported action: {action}")
        return operations[action](model, logical_id)

    def create(self, model: ResourceModel, logical_id: str | None) -> ProgressEvent:
        self._require_identity(model)
        client = self._client_factory(model.GitHubAccess)
        try:
            presence = client.probe(model.repo_owner(), model.Name)
            if presence is Presence.PRESENT:
                raise exceptions.AlreadyExists(self.type_name, logical_id or model.Name)
            self._check_indeterminate(presence, model)

            try:
                data = client.create_repo(create_payload(model), org=model.Org)
            except GitHubError as e:
                logger.error(f"Failed to create repository {model.Name}: {e}")
                raise exceptions.InternalFailure(str(e)) from e
        finally:
            client.close()

        return self._success(apply_repo_data(model, data))

    def update(self, model: ResourceModel, logical_id: str | None) -> ProgressEvent:
        self._require_identity(model)
        owner = model.repo_owner()
        client = self._client_factory(model.GitHubAccess)
        try:
            presence = client.probe(owner, model.Name)
            self._check_indeterminate(presence, model)
            if presence is not Presence.PRESENT:
                raise exceptions.NotFound(self.type_name, logical_id or model.Name)

            try:
                data = client.update_repo(owner, model.Name, update_payload(model))
            except GitHubError as e:
                logger.error(f"Failed to update repository {owner}/{model.Name}: {e}")
                raise exceptions.InternalFailure(str(e)) from e
        finally:
            client.close()

        return self._success(apply_repo_data(model, data))

    def delete(self, model: ResourceModel, logical_id: str | None) -> ProgressEvent:
        self._require_identity(model)
        owner = model.repo_owner()
        if not owner:
            raise exceptions.NotFound(self.type_name, logical_id or model.Name)

        client = self._client_factory(model.GitHubAccess)
        try:
            client.delete_repo(owner, model.Name)
        except RepositoryNotFound as e:
            logger.error(f"Repository {owner}/{model.Name} was already gone: {e}")
            raise exceptions.NotFound(self.type_name, logical_id or model.Name) from e
        except GitHubError as e:
            logger.error(f"Failed to delete repository {owner}/{model.Name}: {e}")
            raise exceptions.InternalFailure(str(e)) from e
        finally:
            client.close()

        # DELETE returns no body, so there is nothing to map back.
        return ProgressEvent(status=OperationStatus.SUCCESS)

    def read(self, model: ResourceModel, logical_id: str | None) -> ProgressEvent:
        self._require_identity(model)
        owner = model.repo_owner()
        if not owner:
            raise exceptions.NotFound(self.type_name, logical_id or model.Name)

        client = self._client_factory(model.GitHubAccess)
        try:
            data = client.get_repo(owner, model.Name)
        except RepositoryNotFound as e:
            raise exceptions.NotFound(self.type_name, logical_id or model.Name) from e
        except AccessForbidden as e:
            raise exceptions.AccessDenied("\n".join(e.messages)) from e
        except GitHubError as e:
            raise exceptions.InternalFailure(str(e)) from e
        finally:
            client.close()

        return self._success(apply_repo_data(model, data))

    def list(self, model: ResourceModel, logical_id: str | None) -> ProgressEvent:
        """Echo the caller's model back; repositories are not enumerated."""
        return ProgressEvent(status=OperationStatus.SUCCESS, resourceModels=[model])

    def _default_client(self, token: str) -> GitHubClient:
        return GitHubClient(token, base_url=self._config.api_url)

    def _require_identity(self, model: ResourceModel) -> None:
        if not model.GitHubAccess:
            raise exceptions.InvalidRequest("GitHubAccess is required")
        if not model.Name:
            raise exceptions.InvalidRequest("Name is required")

    def _check_indeterminate(self, presence: Presence, model: ResourceModel) -> None:
        """Apply the configured policy when the probe could not decide."""
        if presence is not Presence.INDETERMINATE:
            return
        if self._config.strict_probe:
            raise exceptions.InternalFailure(
                f"Could not determine whether repository {model.Name} exists"
            )
        logger.warning(f"Treating repository {model.Name} as absent after inconclusive check")

    @staticmethod
    def _success(model: ResourceModel) -> ProgressEvent:
        return ProgressEvent(status=OperationStatus.SUCCESS, resourceModel=model)
