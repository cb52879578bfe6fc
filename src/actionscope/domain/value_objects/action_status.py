"""Action lifecycle status."""

from enum import StrEnum


class ActionStatus(StrEnum):
    """Lifecycle states of an action.

    ``late`` is an override set when the due date has passed before completion.
    ``validated`` and ``archived`` are terminal.
    """

    IDENTIFIED = "identified"
    PLANNED = "planned"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    LATE = "late"
    VALIDATED = "validated"
    ARCHIVED = "archived"

    @property
    def is_terminal(self) -> bool:
        return self in (ActionStatus.VALIDATED, ActionStatus.ARCHIVED)

    @property
    def label(self) -> str:
        """Display label."""
        return _STATUS_LABELS[self]

    @classmethod
    def parse(cls, value: "str | ActionStatus | None") -> "ActionStatus | None":
        """Parse a stored status value; unknown or missing values give None."""
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return None


_STATUS_LABELS: dict[ActionStatus, str] = {
    ActionStatus.IDENTIFIED: "Identifiée",
    ActionStatus.PLANNED: "Prévue",
    ActionStatus.IN_PROGRESS: "En cours",
    ActionStatus.COMPLETED: "Finalisée",
    ActionStatus.LATE: "En retard",
    ActionStatus.VALIDATED: "Validée",
    ActionStatus.ARCHIVED: "Archivée",
}
