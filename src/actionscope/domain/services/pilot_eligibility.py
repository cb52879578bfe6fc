"""Which users may be assigned as pilot of an action."""

from collections.abc import Iterable

from actionscope.domain.entities import User
from actionscope.domain.value_objects import HierarchyLevel, Placement, Role

# Granularity at which a candidate of each role is matched, most specific first.
_CANDIDATE_LEVELS: dict[Role, tuple[HierarchyLevel, ...]] = {
    Role.OPERATOR: (
        HierarchyLevel.POST,
        HierarchyLevel.TEAM,
        HierarchyLevel.LINE,
        HierarchyLevel.SERVICE,
    ),
    Role.TEAM_LEADER: (HierarchyLevel.TEAM, HierarchyLevel.LINE, HierarchyLevel.SERVICE),
    Role.SUPERVISOR: (HierarchyLevel.LINE, HierarchyLevel.SERVICE),
    Role.MANAGER: (HierarchyLevel.SERVICE,),
    Role.ADMIN: (),
}


def _fits_selection(candidate: User, role: Role, selection: Placement) -> bool:
    # Only the most specific selected level applies.
    for level in _CANDIDATE_LEVELS[role]:
        selected = selection.id_at(level)
        if selected is not None:
            return candidate.placement.id_at(level) == selected
    return True


def can_assign_pilot(
    assigner_role: Role | str | None, candidate: User, selection: Placement
) -> bool:
    """True when ``candidate`` may be picked as pilot for an action placed at ``selection``.

    Candidates must be active, of a role level no higher than the assigner's
    (admin may assign anyone), and placed within the selection at their own
    role's granularity.
    """
    assigner = Role.parse(assigner_role)
    role = Role.parse(candidate.role)
    if assigner is None or role is None or not candidate.is_active:
        return False
    if assigner != Role.ADMIN and role.level > assigner.level:
        return False
    return _fits_selection(candidate, role, selection)


def eligible_pilots(
    assigner_role: Role | str | None, users: Iterable[User], selection: Placement
) -> list[User]:
    return [u for u in users if can_assign_pilot(assigner_role, u, selection)]
