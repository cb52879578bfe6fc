"""Action entity - corrective or preventive work item."""

from dataclasses import dataclass, field
from datetime import date, datetime

from actionscope.domain.value_objects import ActionStatus, Placement


@dataclass
class Action:
    """Tracked action with a pilot, a creator and a placement.

    ``completed_at`` and ``validated_at`` are stamped once, on the first
    transition into ``completed`` and ``validated`` respectively.
    """

    id: str
    pilot_id: str | None
    created_by_id: str | None
    status: ActionStatus
    placement: Placement = field(default_factory=Placement)
    title: str = ""
    description: str = ""
    problem: str = ""
    root_cause: str | None = None
    type: str = "corrective"
    urgency: str = "medium"
    category_5m: str | None = None
    due_date: date | None = None
    progress_percent: int = 0
    efficiency_percent: int | None = None
    comments: str | None = None
    completed_at: datetime | None = None
    validated_at: datetime | None = None
    updated_at: datetime | None = None
