"""Authorization decision resources for the presentation layer.

These endpoints only tell the front end which controls to enable. Writes are
checked again by the use cases at the data-layer boundary.
"""

from datetime import datetime

import falcon.asgi

from actionscope.domain.entities import READ_ONLY
from actionscope.domain.services import (
    can_edit,
    is_pilot,
    is_read_only,
    resolve_capabilities,
    stamp_status_timestamps,
)
from actionscope.domain.value_objects import ActionStatus
from actionscope.interfaces.api.serializers import (
    capabilities_to_json,
    parse_action,
    parse_actor,
    timestamps_to_json,
)


def _parse_bool(value: str | None) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes")


def _parse_datetime(value: str | None) -> datetime | None:
    if not value:
        return None
    return datetime.fromisoformat(value)


class EditAuthorizationResource:
    """POST /v1/authorizations/edit - can the actor open the action, and with which controls."""

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Evaluate actor and action snapshots."""
        try:
            body = await req.get_media()
            actor = parse_actor(body["actor"])
            action = parse_action(body["action"])
        except KeyError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return
        except (ValueError, TypeError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        read_only = is_read_only(action)
        allowed = can_edit(actor, action) and not read_only
        capabilities = (
            resolve_capabilities(actor.role, is_pilot(actor, action)) if allowed else READ_ONLY
        )
        resp.media = {
            "canEdit": allowed,
            "readOnly": read_only,
            "capabilities": capabilities_to_json(capabilities),
        }
        resp.status = falcon.HTTP_200


class RoleCapabilitiesResource:
    """GET /v1/roles/{role}/capabilities - capability table row for a role."""

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role: str
    ) -> None:
        """Unknown roles get the read-only default."""
        is_pilot_flag = _parse_bool(req.get_param("isPilot") or req.get_param("is_pilot"))
        resp.media = capabilities_to_json(resolve_capabilities(role, is_pilot_flag))
        resp.status = falcon.HTTP_200


class StatusTimestampsResource:
    """POST /v1/authorizations/status-timestamps - timestamps to stamp for a status change."""

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        try:
            body = await req.get_media()
            new_status = ActionStatus.parse(body["newStatus"])
            if new_status is None:
                raise ValueError(f"Unknown status: {body['newStatus']}")
            stamps = stamp_status_timestamps(
                body.get("previousStatus"),
                new_status,
                completed_at=_parse_datetime(body.get("completedAt")),
                validated_at=_parse_datetime(body.get("validatedAt")),
            )
        except KeyError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return
        except (ValueError, TypeError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        resp.media = timestamps_to_json(stamps)
        resp.status = falcon.HTTP_200
