"""Edit authorization - may an actor open an action for editing at all.

Each role has its own hand-specified rule; this is not a generic scope
inclusion check:

- operator: only the current pilot.
- team_leader: pilot or creator, else team, line or service match.
- supervisor: pilot or creator, else line or service match.
- manager: pilot or creator, else service match.
- admin: always.

Archived actions are read-only for every role. ``can_edit`` does not look at
the status; callers apply ``is_read_only`` first, or use ``can_open_for_edit``.
"""

from actionscope.domain.entities import Action, Actor
from actionscope.domain.value_objects import (
    ActionStatus,
    HierarchyLevel,
    Role,
    placement_contains,
)

_SCOPE_LEVELS: dict[Role, tuple[HierarchyLevel, ...]] = {
    Role.TEAM_LEADER: (HierarchyLevel.TEAM, HierarchyLevel.LINE, HierarchyLevel.SERVICE),
    Role.SUPERVISOR: (HierarchyLevel.LINE, HierarchyLevel.SERVICE),
    Role.MANAGER: (HierarchyLevel.SERVICE,),
}


def is_pilot(actor: Actor, action: Action) -> bool:
    return actor.id is not None and action.pilot_id == actor.id


def is_creator(actor: Actor, action: Action) -> bool:
    return actor.id is not None and action.created_by_id == actor.id


def in_scope(actor: Actor, action: Action, levels: tuple[HierarchyLevel, ...]) -> bool:
    """True when the placements match at any one of ``levels``."""
    return any(
        placement_contains(actor.placement, action.placement, level) for level in levels
    )


def can_edit(actor: Actor, action: Action) -> bool:
    """Decide whether ``actor`` may open ``action`` for editing."""
    role = Role.parse(actor.role)
    if role is None or not actor.id:
        return False

    match role:
        case Role.OPERATOR:
            return is_pilot(actor, action)
        case Role.TEAM_LEADER | Role.SUPERVISOR | Role.MANAGER:
            if is_pilot(actor, action) or is_creator(actor, action):
                return True
            return in_scope(actor, action, _SCOPE_LEVELS[role])
        case Role.ADMIN:
            return True
    return False


def is_read_only(action: Action) -> bool:
    """Archived actions are immutable for everyone, admin included."""
    return action.status == ActionStatus.ARCHIVED


def can_open_for_edit(actor: Actor, action: Action) -> bool:
    """``can_edit`` with the archived precondition applied."""
    return not is_read_only(action) and can_edit(actor, action)
