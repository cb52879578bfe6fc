"""Translate JSON snapshots from the front end to domain objects and back."""

from typing import Any

from actionscope.domain.entities import Action, Actor, CapabilitySet
from actionscope.domain.services import StatusTimestamps
from actionscope.domain.value_objects import ActionStatus, Placement, Role


def _get(body: dict[str, Any], camel: str, snake: str) -> Any:
    return body[camel] if camel in body else body.get(snake)


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def parse_placement(body: dict[str, Any]) -> Placement:
    return Placement(
        service_id=_optional_str(_get(body, "serviceId", "service_id")),
        line_id=_optional_str(_get(body, "lineId", "line_id")),
        team_id=_optional_str(_get(body, "teamId", "team_id")),
        post_id=_optional_str(_get(body, "postId", "post_id")),
    )


def parse_actor(body: dict[str, Any]) -> Actor:
    """Actor snapshot; unknown roles become None."""
    if not isinstance(body, dict):
        raise ValueError("actor must be an object")
    return Actor(
        role=Role.parse(body.get("role")),
        id=_optional_str(body.get("id")),
        placement=parse_placement(body),
    )


def parse_action(body: dict[str, Any]) -> Action:
    """Action snapshot; status is required and must be a known status."""
    if not isinstance(body, dict):
        raise ValueError("action must be an object")
    status = ActionStatus.parse(body.get("status", ActionStatus.IDENTIFIED.value))
    if status is None:
        raise ValueError(f"Unknown status: {body.get('status')}")
    return Action(
        id=str(body.get("id", "")),
        pilot_id=_optional_str(_get(body, "pilotId", "pilot_id")),
        created_by_id=_optional_str(_get(body, "createdById", "created_by_id")),
        status=status,
        placement=parse_placement(body),
    )


def capabilities_to_json(capabilities: CapabilitySet) -> dict[str, Any]:
    return {
        "canEditStatus": capabilities.can_edit_status,
        "canEditProgress": capabilities.can_edit_progress,
        "canAddAttachments": capabilities.can_add_attachments,
        "canEditCreationFields": capabilities.can_edit_creation_fields,
        "canEditEfficiency": capabilities.can_edit_efficiency,
        "canValidate": capabilities.can_validate,
        "allowedStatusTransitions": [s.value for s in capabilities.allowed_status_transitions],
        "roleLabel": capabilities.role_label,
    }


def timestamps_to_json(stamps: StatusTimestamps) -> dict[str, Any]:
    return {
        "completedAt": stamps.completed_at.isoformat() if stamps.completed_at else None,
        "validatedAt": stamps.validated_at.isoformat() if stamps.validated_at else None,
    }
