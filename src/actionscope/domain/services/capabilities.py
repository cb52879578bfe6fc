"""Role capability table and field-level resolver."""

from actionscope.domain.entities import READ_ONLY, Action, Actor, CapabilitySet
from actionscope.domain.services.edit_authorization import (
    can_open_for_edit,
    is_pilot as actor_is_pilot,
)
from actionscope.domain.value_objects import ActionStatus, Role

_PILOT_TRANSITIONS = (
    ActionStatus.IDENTIFIED,
    ActionStatus.PLANNED,
    ActionStatus.IN_PROGRESS,
    ActionStatus.COMPLETED,
)
_TEAM_LEADER_TRANSITIONS = _PILOT_TRANSITIONS + (ActionStatus.LATE,)
_FULL_TRANSITIONS = _TEAM_LEADER_TRANSITIONS + (
    ActionStatus.VALIDATED,
    ActionStatus.ARCHIVED,
)

OPERATOR_PILOT = CapabilitySet(
    can_edit_status=True,
    can_edit_progress=True,
    can_add_attachments=True,
    allowed_status_transitions=_PILOT_TRANSITIONS,
    role_label="Opérateur Pilote",
)

OPERATOR_READ_ONLY = CapabilitySet(role_label="Opérateur (Lecture seule)")

TEAM_LEADER = CapabilitySet(
    can_edit_status=True,
    can_edit_progress=True,
    can_add_attachments=True,
    can_edit_creation_fields=True,
    allowed_status_transitions=_TEAM_LEADER_TRANSITIONS,
    role_label=Role.TEAM_LEADER.label,
)


def _full_access(role: Role) -> CapabilitySet:
    return CapabilitySet(
        can_edit_status=True,
        can_edit_progress=True,
        can_add_attachments=True,
        can_edit_creation_fields=True,
        can_edit_efficiency=True,
        can_validate=True,
        allowed_status_transitions=_FULL_TRANSITIONS,
        role_label=role.label,
    )


# Keyed by (role, is_pilot); only the operator row depends on the pilot flag.
CAPABILITY_TABLE: dict[tuple[Role, bool], CapabilitySet] = {
    (Role.OPERATOR, True): OPERATOR_PILOT,
    (Role.OPERATOR, False): OPERATOR_READ_ONLY,
    (Role.TEAM_LEADER, True): TEAM_LEADER,
    (Role.TEAM_LEADER, False): TEAM_LEADER,
    (Role.SUPERVISOR, True): _full_access(Role.SUPERVISOR),
    (Role.SUPERVISOR, False): _full_access(Role.SUPERVISOR),
    (Role.MANAGER, True): _full_access(Role.MANAGER),
    (Role.MANAGER, False): _full_access(Role.MANAGER),
    (Role.ADMIN, True): _full_access(Role.ADMIN),
    (Role.ADMIN, False): _full_access(Role.ADMIN),
}


def resolve_capabilities(role: Role | str | None, is_pilot: bool) -> CapabilitySet:
    """Look up the capability set for ``role``.

    Unknown or missing roles get the read-only default. Never raises.
    """
    parsed = Role.parse(role)
    if parsed is None:
        return READ_ONLY
    return CAPABILITY_TABLE.get((parsed, bool(is_pilot)), READ_ONLY)


def capabilities_for(actor: Actor, action: Action) -> CapabilitySet:
    """Capabilities of ``actor`` on ``action``, read-only when it cannot be opened for edit."""
    if not can_open_for_edit(actor, action):
        return READ_ONLY
    return resolve_capabilities(actor.role, actor_is_pilot(actor, action))
