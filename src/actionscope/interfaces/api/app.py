"""Falcon ASGI application."""

import logging

import falcon
import falcon.asgi
from falcon.asgi import App

from actionscope.application.ports import PermissionChecker
from actionscope.application.use_cases.action.get_action_permissions import (
    GetActionPermissionsUseCase,
)
from actionscope.application.use_cases.action.list_archived_actions import (
    ListArchivedActionsUseCase,
)
from actionscope.application.use_cases.action.list_eligible_pilots import (
    ListEligiblePilotsUseCase,
)
from actionscope.application.use_cases.action.update_action import UpdateActionUseCase
from actionscope.application.use_cases.attachment.add_attachment import AddAttachmentUseCase
from actionscope.application.use_cases.attachment.delete_attachment import (
    DeleteAttachmentUseCase,
)
from actionscope.infrastructure.permission.permission_checker import ScopePermissionChecker
from actionscope.interfaces.api.middleware.auth import IdentityMiddleware
from actionscope.interfaces.api.middleware.cors import CORSMiddleware
from actionscope.interfaces.api.resources.actions import (
    ActionAttachmentsResource,
    ActionPermissionsResource,
    ActionResource,
    ArchivedActionsResource,
    AttachmentResource,
    EligiblePilotsResource,
)
from actionscope.interfaces.api.resources.authorization import (
    EditAuthorizationResource,
    RoleCapabilitiesResource,
    StatusTimestampsResource,
)
from actionscope.interfaces.api.resources.health import HealthResource

logger = logging.getLogger(__name__)


async def _log_exception(req, resp, ex, params) -> None:
    logger.error("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    unit_of_work_factory: type | None = None,
    cors_origins: list[str] | None = None,
    permission_checker: PermissionChecker | None = None,
) -> App:
    """Create Falcon ASGI app with routes.

    The snapshot decision endpoints need no data store. The action endpoints
    are mounted only when a unit of work factory for the store is supplied;
    without an explicit checker they use the scope checker over that store.
    """
    app = falcon.asgi.App(
        middleware=[
            CORSMiddleware(cors_origins or []),
            IdentityMiddleware(),
        ],
    )
    app.add_error_handler(Exception, _log_exception)

    health = HealthResource()
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    app.add_route("/v1/authorizations/edit", EditAuthorizationResource())
    app.add_route("/v1/authorizations/status-timestamps", StatusTimestampsResource())
    app.add_route("/v1/roles/{role}/capabilities", RoleCapabilitiesResource())

    if unit_of_work_factory is None:
        return app

    checker = permission_checker or ScopePermissionChecker(unit_of_work_factory)
    app.add_route(
        "/v1/actions/{action_id}",
        ActionResource(UpdateActionUseCase(unit_of_work_factory, checker)),
    )
    app.add_route(
        "/v1/actions/{action_id}/permissions",
        ActionPermissionsResource(GetActionPermissionsUseCase(unit_of_work_factory, checker)),
    )
    app.add_route(
        "/v1/actions/{action_id}/attachments",
        ActionAttachmentsResource(AddAttachmentUseCase(unit_of_work_factory, checker)),
    )
    app.add_route(
        "/v1/pilots/eligible",
        EligiblePilotsResource(ListEligiblePilotsUseCase(unit_of_work_factory)),
    )
    app.add_route(
        "/v1/archived-actions",
        ArchivedActionsResource(ListArchivedActionsUseCase(unit_of_work_factory)),
    )
    app.add_route(
        "/v1/attachments/{attachment_id}",
        AttachmentResource(DeleteAttachmentUseCase(unit_of_work_factory)),
    )
    return app
