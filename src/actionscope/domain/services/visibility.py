"""Read-side rules: archive visibility and attachment deletion."""

from actionscope.domain.entities import Action, Actor, Attachment
from actionscope.domain.services.edit_authorization import in_scope, is_pilot
from actionscope.domain.value_objects import HierarchyLevel, Role, placement_contains


def can_view_archived(actor: Actor, action: Action) -> bool:
    """Whether an archived action shows up in the actor's archive."""
    role = Role.parse(actor.role)
    if role is None or not actor.id:
        return False

    match role:
        case Role.OPERATOR:
            if is_pilot(actor, action):
                return True
            return placement_contains(
                actor.placement, action.placement, HierarchyLevel.POST
            ) and placement_contains(actor.placement, action.placement, HierarchyLevel.TEAM)
        case Role.TEAM_LEADER:
            return in_scope(actor, action, (HierarchyLevel.TEAM, HierarchyLevel.LINE))
        case Role.SUPERVISOR:
            return in_scope(actor, action, (HierarchyLevel.LINE, HierarchyLevel.SERVICE))
        case Role.MANAGER:
            return in_scope(actor, action, (HierarchyLevel.SERVICE,))
        case Role.ADMIN:
            return True
    return False


def can_delete_attachment(actor: Actor, attachment: Attachment) -> bool:
    """Uploader, manager or admin."""
    if not actor.id:
        return False
    if attachment.uploaded_by_id == actor.id:
        return True
    return Role.parse(actor.role) in (Role.MANAGER, Role.ADMIN)
