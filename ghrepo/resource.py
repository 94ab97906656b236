"""CloudFormation entrypoints for GitHub::Repositories::Repository.

Registers one function per lifecycle action with the resource provider
framework. Each one unpacks the request and delegates to RepositoryHandler.
"""

from __future__ import annotations

import logging
from typing import Any, MutableMapping, Optional

from cloudformation_cli_python_lib import (
    Action,
    ProgressEvent,
    Resource,
    SessionProxy,
    exceptions,
)
from cloudformation_cli_python_lib.interface import BaseResourceHandlerRequest

from ghrepo.handlers import RepositoryHandler
from ghrepo.models import TYPE_NAME, ResourceModel

logger = logging.getLogger(__name__)

resource = Resource(TYPE_NAME, ResourceModel)
handler = RepositoryHandler()


def _dispatch(action: Action, request: BaseResourceHandlerRequest) -> ProgressEvent:
    model = request.desiredResourceState
    if model is None:
        raise exceptions.InvalidRequest("Desired resource state is required")
    logger.info(f"{action.name} {TYPE_NAME} ({request.logicalResourceIdentifier})")
    return handler.invoke(action, model, request.logicalResourceIdentifier)


@resource.handler(Action.CREATE)
def create_handler(
    session: Optional[SessionProxy],
    request: BaseResourceHandlerRequest,
    callback_context: MutableMapping[str, Any],
) -> ProgressEvent:
    return _dispatch(Action.CREATE, request)


@resource.handler(Action.UPDATE)
def update_handler(
    session: Optional[SessionProxy],
    request: BaseResourceHandlerRequest,
    callback_context: MutableMapping[str, Any],
) -> ProgressEvent:
    return _dispatch(Action.UPDATE, request)


@resource.handler(Action.DELETE)
def delete_handler(
    session: Optional[SessionProxy],
    request: BaseResourceHandlerRequest,
    callback_context: MutableMapping[str, Any],
) -> ProgressEvent:
    return _dispatch(Action.DELETE, request)


@resource.handler(Action.READ)
def read_handler(
    session: Optional[SessionProxy],
    request: BaseResourceHandlerRequest,
    callback_context: MutableMapping[str, Any],
) -> ProgressEvent:
    return _dispatch(Action.READ, request)


@resource.handler(Action.LIST)
def list_handler(
    session: Optional[SessionProxy],
    request: BaseResourceHandlerRequest,
    callback_context: MutableMapping[str, Any],
) -> ProgressEvent:
    return _dispatch(Action.LIST, request)


# Lambda handler registered with CloudFormation
entrypoint = resource
# Used by `sam local invoke` / `cfn test`
test_entrypoint = resource.test_entrypoint
