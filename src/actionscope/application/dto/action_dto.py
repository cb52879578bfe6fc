"""Action DTOs."""

from dataclasses import dataclass, fields
from datetime import date
from typing import Any

from actionscope.domain.entities import CapabilitySet


@dataclass
class ActionUpdateInput:
    """Requested changes to an action. None means "leave unchanged".

    ``placement`` holds only the hierarchy levels the caller sent, keyed by
    ``Placement`` field name; a level mapped to None is cleared. Levels left
    out keep their stored value.
    """

    title: str | None = None
    description: str | None = None
    problem: str | None = None
    root_cause: str | None = None
    type: str | None = None
    urgency: str | None = None
    category_5m: str | None = None
    pilot_id: str | None = None
    placement: dict[str, str | None] | None = None
    due_date: date | None = None
    status: str | None = None
    progress_percent: int | None = None
    efficiency_percent: int | None = None
    comments: str | None = None

    def changes(self) -> dict[str, Any]:
        """Only the fields that were provided."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass
class ActionPermissionsOutput:
    """What the current user may do on one action."""

    action_id: str
    can_edit: bool
    read_only: bool
    capabilities: CapabilitySet


@dataclass
class AttachmentInput:
    """Metadata of a file already stored in the object store."""

    name: str
    path: str | None = None
