"""Domain value objects."""

from actionscope.domain.value_objects.action_status import ActionStatus
from actionscope.domain.value_objects.placement import (
    HierarchyLevel,
    Placement,
    placement_contains,
)
from actionscope.domain.value_objects.role import Role

__all__ = [
    "ActionStatus",
    "HierarchyLevel",
    "Placement",
    "Role",
    "placement_contains",
]
