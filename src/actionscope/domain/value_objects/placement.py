"""Organizational placement in the service > line > team > post hierarchy."""

from dataclasses import dataclass
from enum import StrEnum


class HierarchyLevel(StrEnum):
    """Levels of the organizational hierarchy, broadest first."""

    SERVICE = "service"
    LINE = "line"
    TEAM = "team"
    POST = "post"


@dataclass(frozen=True)
class Placement:
    """Position of a user or an action in the hierarchy.

    All four levels are stored directly (denormalized) and are trusted as given:
    a team is not checked against its line, nor a post against its team.
    Empty strings are normalized to None.
    """

    service_id: str | None = None
    line_id: str | None = None
    team_id: str | None = None
    post_id: str | None = None

    def __post_init__(self) -> None:
        for name in ("service_id", "line_id", "team_id", "post_id"):
            if getattr(self, name) == "":
                object.__setattr__(self, name, None)

    def id_at(self, level: HierarchyLevel) -> str | None:
        """Identifier at the given level, or None when unset."""
        match level:
            case HierarchyLevel.SERVICE:
                return self.service_id
            case HierarchyLevel.LINE:
                return self.line_id
            case HierarchyLevel.TEAM:
                return self.team_id
            case HierarchyLevel.POST:
                return self.post_id


def placement_contains(
    container: Placement, target: Placement, level: HierarchyLevel
) -> bool:
    """True when both placements carry the same identifier at ``level``.

    Absence on either side never matches.
    """
    container_id = container.id_at(level)
    return container_id is not None and container_id == target.id_at(level)
