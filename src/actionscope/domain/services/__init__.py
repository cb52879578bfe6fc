"""Domain services - pure authorization rules."""

from actionscope.domain.services.capabilities import (
    CAPABILITY_TABLE,
    capabilities_for,
    resolve_capabilities,
)
from actionscope.domain.services.edit_authorization import (
    can_edit,
    can_open_for_edit,
    is_creator,
    is_pilot,
    is_read_only,
)
from actionscope.domain.services.field_gate import CREATION_FIELDS, gate_update
from actionscope.domain.services.pilot_eligibility import can_assign_pilot, eligible_pilots
from actionscope.domain.services.status_timestamps import (
    StatusTimestamps,
    stamp_status_timestamps,
)
from actionscope.domain.services.visibility import can_delete_attachment, can_view_archived

__all__ = [
    "CAPABILITY_TABLE",
    "CREATION_FIELDS",
    "StatusTimestamps",
    "can_assign_pilot",
    "can_delete_attachment",
    "can_edit",
    "can_open_for_edit",
    "can_view_archived",
    "capabilities_for",
    "eligible_pilots",
    "gate_update",
    "is_creator",
    "is_pilot",
    "is_read_only",
    "resolve_capabilities",
    "stamp_status_timestamps",
]
