"""Capability set - field-level permissions resolved for one action."""

from dataclasses import dataclass

from actionscope.domain.value_objects import ActionStatus

READ_ONLY_LABEL = "Lecture seule"


@dataclass(frozen=True)
class CapabilitySet:
    """Which controls of the edit form are enabled.

    Derived on every query and never persisted.
    """

    can_edit_status: bool = False
    can_edit_progress: bool = False
    can_add_attachments: bool = False
    can_edit_creation_fields: bool = False
    can_edit_efficiency: bool = False
    can_validate: bool = False
    allowed_status_transitions: tuple[ActionStatus, ...] = ()
    role_label: str = READ_ONLY_LABEL

    @property
    def is_read_only(self) -> bool:
        return not (
            self.can_edit_status
            or self.can_edit_progress
            or self.can_add_attachments
            or self.can_edit_creation_fields
            or self.can_edit_efficiency
            or self.can_validate
        )

    def allows_status(self, status: ActionStatus) -> bool:
        return self.can_edit_status and status in self.allowed_status_transitions


READ_ONLY = CapabilitySet()
