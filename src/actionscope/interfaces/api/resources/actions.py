"""Action API resources backed by the data store."""

from datetime import date
from typing import Any

import falcon.asgi

from actionscope.application.dto.action_dto import ActionUpdateInput, AttachmentInput
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
from actionscope.domain.entities import Action, Attachment
from actionscope.domain.exceptions import NotFound, PermissionDenied, ValidationError
from actionscope.domain.value_objects import Placement
from actionscope.interfaces.api.serializers import capabilities_to_json

_PLACEMENT_KEYS = (
    ("serviceId", "service_id"),
    ("lineId", "line_id"),
    ("teamId", "team_id"),
    ("postId", "post_id"),
)


def _current_user(req: falcon.asgi.Request, resp: falcon.asgi.Response):
    user = getattr(req.context, "user", None)
    if not user:
        resp.status = falcon.HTTP_401
        resp.media = {"error": "Unauthorized"}
    return user


def _action_to_json(action: Action) -> dict[str, Any]:
    return {
        "id": action.id,
        "title": action.title,
        "status": action.status.value,
        "pilotId": action.pilot_id,
        "createdById": action.created_by_id,
        "serviceId": action.placement.service_id,
        "lineId": action.placement.line_id,
        "teamId": action.placement.team_id,
        "postId": action.placement.post_id,
        "progressPercent": action.progress_percent,
        "efficiencyPercent": action.efficiency_percent,
        "comments": action.comments,
        "completedAt": action.completed_at.isoformat() if action.completed_at else None,
        "validatedAt": action.validated_at.isoformat() if action.validated_at else None,
    }


def _attachment_to_json(attachment: Attachment) -> dict[str, Any]:
    return {
        "id": attachment.id,
        "actionId": attachment.action_id,
        "uploadedById": attachment.uploaded_by_id,
        "name": attachment.name,
        "path": attachment.path,
        "uploadedAt": attachment.uploaded_at.isoformat() if attachment.uploaded_at else None,
    }


def parse_placement_levels(body: dict[str, Any]) -> dict[str, str | None] | None:
    """Placement levels present in the body; absent keys are left out, not cleared."""
    levels = {}
    for camel, snake in _PLACEMENT_KEYS:
        if camel in body or snake in body:
            value = body[camel] if camel in body else body[snake]
            levels[snake] = None if value is None else str(value)
    return levels or None


def parse_update(body: dict[str, Any]) -> ActionUpdateInput:
    """Build an update from a camelCase (or snake_case) JSON body."""
    if not isinstance(body, dict):
        raise ValueError("Body must be an object")

    def get(camel: str, snake: str) -> Any:
        return body[camel] if camel in body else body.get(snake)

    due_date = get("dueDate", "due_date")
    placement = parse_placement_levels(body)
    return ActionUpdateInput(
        title=body.get("title"),
        description=body.get("description"),
        problem=body.get("problem"),
        root_cause=get("rootCause", "root_cause"),
        type=body.get("type"),
        urgency=body.get("urgency"),
        category_5m=get("category5M", "category_5m"),
        pilot_id=get("pilotId", "pilot_id"),
        placement=placement,
        due_date=date.fromisoformat(due_date) if due_date else None,
        status=body.get("status"),
        progress_percent=get("progressPercent", "progress_percent"),
        efficiency_percent=get("efficiencyPercent", "efficiency_percent"),
        comments=body.get("comments"),
    )


class ActionResource:
    """PATCH /v1/actions/{action_id} - apply an edit within the caller's rights."""

    def __init__(self, update_action: UpdateActionUseCase) -> None:
        self._update = update_action

    async def on_patch(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        action_id: str,
    ) -> None:
        user = _current_user(req, resp)
        if not user:
            return

        try:
            body = await req.get_media()
            update = parse_update(body)
        except (ValueError, TypeError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        try:
            action = await self._update.execute(user.user_id, action_id, update)
        except PermissionDenied as e:
            resp.status = falcon.HTTP_403
            resp.media = {"error": str(e)}
            return
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        resp.media = _action_to_json(action)
        resp.status = falcon.HTTP_200


class ActionPermissionsResource:
    """GET /v1/actions/{action_id}/permissions - the caller's capabilities on an action."""

    def __init__(self, get_permissions: GetActionPermissionsUseCase) -> None:
        self._get_permissions = get_permissions

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        action_id: str,
    ) -> None:
        user = _current_user(req, resp)
        if not user:
            return

        try:
            result = await self._get_permissions.execute(user.user_id, action_id)
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return

        resp.media = {
            "actionId": result.action_id,
            "canEdit": result.can_edit,
            "readOnly": result.read_only,
            "capabilities": capabilities_to_json(result.capabilities),
        }
        resp.status = falcon.HTTP_200


class EligiblePilotsResource:
    """GET /v1/pilots/eligible?serviceId=&lineId=&teamId=&postId= - pilot picker options."""

    def __init__(self, list_pilots: ListEligiblePilotsUseCase) -> None:
        self._list_pilots = list_pilots

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = _current_user(req, resp)
        if not user:
            return

        selection = Placement(
            service_id=req.get_param("serviceId"),
            line_id=req.get_param("lineId"),
            team_id=req.get_param("teamId"),
            post_id=req.get_param("postId"),
        )
        pilots = await self._list_pilots.execute(user.user_id, selection)
        resp.media = {
            "items": [
                {
                    "id": p.id,
                    "role": p.role.value if p.role else None,
                    "roleLabel": p.role.label if p.role else None,
                    "firstName": p.first_name,
                    "lastName": p.last_name,
                }
                for p in pilots
            ]
        }
        resp.status = falcon.HTTP_200


class ArchivedActionsResource:
    """GET /v1/archived-actions - archived actions visible to the caller."""

    def __init__(self, list_archived: ListArchivedActionsUseCase) -> None:
        self._list_archived = list_archived

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = _current_user(req, resp)
        if not user:
            return

        actions = await self._list_archived.execute(user.user_id)
        resp.media = {"items": [_action_to_json(a) for a in actions]}
        resp.status = falcon.HTTP_200


class AttachmentResource:
    """DELETE /v1/attachments/{attachment_id}."""

    def __init__(self, delete_attachment: DeleteAttachmentUseCase) -> None:
        self._delete = delete_attachment

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        attachment_id: str,
    ) -> None:
        user = _current_user(req, resp)
        if not user:
            return

        try:
            await self._delete.execute(user.user_id, attachment_id)
            resp.status = falcon.HTTP_204
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Attachment not found"}


class ActionAttachmentsResource:
    """POST /v1/actions/{action_id}/attachments - record an uploaded file on an action."""

    def __init__(self, add_attachment: AddAttachmentUseCase) -> None:
        self._add = add_attachment

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        action_id: str,
    ) -> None:
        user = _current_user(req, resp)
        if not user:
            return

        try:
            body = await req.get_media()
            data = AttachmentInput(name=str(body["name"]), path=body.get("path"))
        except KeyError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return
        except (AttributeError, TypeError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        try:
            attachment = await self._add.execute(user.user_id, action_id, data)
        except PermissionDenied as e:
            resp.status = falcon.HTTP_403
            resp.media = {"error": str(e)}
            return
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        resp.media = _attachment_to_json(attachment)
        resp.status = falcon.HTTP_201
