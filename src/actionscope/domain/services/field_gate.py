"""Field-gated update assembly.

Given the capabilities an actor holds on an action, reduce a requested change
set to the fields that actor may write. Fields outside the actor's
capabilities are dropped; a status outside the allow-list is rejected.
"""

from collections.abc import Mapping
from typing import Any

from actionscope.domain.entities import Action, CapabilitySet
from actionscope.domain.exceptions import InvalidStatusTransition, ValidationError
from actionscope.domain.value_objects import ActionStatus

CREATION_FIELDS = frozenset(
    {
        "title",
        "description",
        "problem",
        "root_cause",
        "type",
        "urgency",
        "category_5m",
        "pilot_id",
        "placement",
        "due_date",
    }
)


def _check_percent(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 100:
        raise ValidationError(f"{name} must be an integer between 0 and 100")
    return value


def gate_update(
    capabilities: CapabilitySet, action: Action, changes: Mapping[str, Any]
) -> dict[str, Any]:
    """Return the subset of ``changes`` the capabilities allow writing."""
    allowed: dict[str, Any] = {}

    if capabilities.can_edit_creation_fields:
        for name in CREATION_FIELDS:
            if name in changes:
                allowed[name] = changes[name]

    if "status" in changes and capabilities.can_edit_status:
        target = ActionStatus.parse(changes["status"])
        if target is None:
            raise ValidationError(f"Unknown status: {changes['status']}")
        if target != action.status and not capabilities.allows_status(target):
            raise InvalidStatusTransition(action.status.value, target.value)
        allowed["status"] = target

    if "progress_percent" in changes and capabilities.can_edit_progress:
        allowed["progress_percent"] = _check_percent(
            "progress_percent", changes["progress_percent"]
        )

    if "efficiency_percent" in changes and capabilities.can_edit_efficiency:
        allowed["efficiency_percent"] = _check_percent(
            "efficiency_percent", changes["efficiency_percent"]
        )

    # Comments are open to anyone who may open the action.
    if "comments" in changes:
        allowed["comments"] = changes["comments"]

    return allowed
