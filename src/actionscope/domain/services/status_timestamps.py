"""Completion and validation timestamps stamped on status transitions."""

from dataclasses import dataclass
from datetime import UTC, datetime

from actionscope.domain.value_objects import ActionStatus


@dataclass(frozen=True)
class StatusTimestamps:
    """Timestamps to write with a status change; None means leave unchanged."""

    completed_at: datetime | None = None
    validated_at: datetime | None = None


def stamp_status_timestamps(
    previous_status: ActionStatus | str | None,
    new_status: ActionStatus | str,
    completed_at: datetime | None = None,
    validated_at: datetime | None = None,
    now: datetime | None = None,
) -> StatusTimestamps:
    """Stamp ``completed_at``/``validated_at`` when entering those states.

    Write-once: re-saving the same status or a transition into a state whose
    timestamp is already set stamps nothing.
    """
    now = now or datetime.now(UTC)
    previous = ActionStatus.parse(previous_status)
    target = ActionStatus.parse(new_status)

    stamped_completed = None
    stamped_validated = None
    if target == ActionStatus.COMPLETED and previous != target and completed_at is None:
        stamped_completed = now
    if target == ActionStatus.VALIDATED and previous != target and validated_at is None:
        stamped_validated = now
    return StatusTimestamps(completed_at=stamped_completed, validated_at=stamped_validated)
