"""Unit tests for completion and validation stamping."""

from datetime import UTC, datetime

from actionscope.domain.services import stamp_status_timestamps
from actionscope.domain.value_objects import ActionStatus

NOW = datetime(2026, 3, 2, 9, 30, tzinfo=UTC)
EARLIER = datetime(2026, 1, 15, 8, 0, tzinfo=UTC)


def test_entering_completed_stamps_completed_at() -> None:
    stamps = stamp_status_timestamps(ActionStatus.IN_PROGRESS, ActionStatus.COMPLETED, now=NOW)
    assert stamps.completed_at == NOW
    assert stamps.validated_at is None


def test_resaving_completed_does_not_restamp() -> None:
    stamps = stamp_status_timestamps(
        ActionStatus.COMPLETED, ActionStatus.COMPLETED, completed_at=EARLIER, now=NOW
    )
    assert stamps.completed_at is None


def test_existing_completed_at_is_write_once() -> None:
    """Back to completed after a detour keeps the first completion time."""
    stamps = stamp_status_timestamps(
        ActionStatus.IN_PROGRESS, ActionStatus.COMPLETED, completed_at=EARLIER, now=NOW
    )
    assert stamps.completed_at is None


def test_entering_validated_stamps_validated_at() -> None:
    stamps = stamp_status_timestamps("completed", "validated", completed_at=EARLIER, now=NOW)
    assert stamps.validated_at == NOW
    assert stamps.completed_at is None


def test_other_transitions_stamp_nothing() -> None:
    stamps = stamp_status_timestamps(ActionStatus.PLANNED, ActionStatus.LATE, now=NOW)
    assert stamps.completed_at is None and stamps.validated_at is None


def test_default_now_is_timezone_aware() -> None:
    stamps = stamp_status_timestamps(None, ActionStatus.COMPLETED)
    assert stamps.completed_at is not None
    assert stamps.completed_at.tzinfo is not None
