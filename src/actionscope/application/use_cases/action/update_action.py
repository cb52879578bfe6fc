"""Update action use case."""

import logging
from dataclasses import replace
from datetime import UTC, datetime

from actionscope.application.dto.action_dto import ActionUpdateInput
from actionscope.application.ports import PermissionChecker
from actionscope.application.use_cases.actor import load_actor
from actionscope.domain.entities import Action
from actionscope.domain.exceptions import NotFound, PermissionDenied, ValidationError
from actionscope.domain.services import (
    can_assign_pilot,
    gate_update,
    is_pilot,
    is_read_only,
    resolve_capabilities,
    stamp_status_timestamps,
)
from actionscope.domain.value_objects import Placement

logger = logging.getLogger(__name__)

_PLACEMENT_FIELDS = frozenset({"service_id", "line_id", "team_id", "post_id"})


def merge_placement(current: Placement, levels: dict[str, str | None]) -> Placement:
    """Overlay the sent levels on the stored placement."""
    unknown = set(levels) - _PLACEMENT_FIELDS
    if unknown:
        raise ValidationError(f"Unknown placement levels: {sorted(unknown)}")
    return replace(current, **levels)


class UpdateActionUseCase:
    """Apply a user's edit to an action, re-enforcing scope and field permissions.

    This is the data-layer counterpart of the edit form: the same rules the
    presentation layer uses to enable controls are checked again here before
    anything is written.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(
        self,
        user_id: str,
        action_id: str,
        update: ActionUpdateInput,
        now: datetime | None = None,
    ) -> Action:
        """Write the permitted subset of ``update`` and return the updated action.

        Raises PermissionDenied when the action is archived or out of the
        user's scope, InvalidStatusTransition for a status the role may not
        set, ValidationError for an ineligible pilot or bad percentages.
        """
        now = now or datetime.now(UTC)
        allowed = await self._permission_checker.check(user_id, action_id)

        async with self._uow_factory() as uow:
            action = await uow.actions.get_by_id(action_id)
            if not action:
                raise NotFound("Action", action_id)
            if is_read_only(action):
                logger.info("Edit of archived action %s refused for %s", action_id, user_id)
                raise PermissionDenied("Archived actions are read-only")
            if not allowed:
                logger.info("Edit of action %s out of scope for %s", action_id, user_id)
                raise PermissionDenied("User cannot edit this action in their scope")

            actor = await load_actor(uow, user_id)
            capabilities = resolve_capabilities(actor.role, is_pilot(actor, action))
            requested = update.changes()
            if "placement" in requested:
                requested["placement"] = merge_placement(action.placement, requested["placement"])
            changes = gate_update(capabilities, action, requested)

            # A new pilot, or the current one under a moved placement, must fit.
            pilot_id = changes.get("pilot_id", action.pilot_id)
            pilot_changed = pilot_id != action.pilot_id
            placement_changed = changes.get("placement", action.placement) != action.placement
            if pilot_id is not None and (pilot_changed or placement_changed):
                pilot = await uow.users.get_by_id(pilot_id)
                if not pilot:
                    raise NotFound("User", pilot_id)
                selection = changes.get("placement", action.placement)
                if not can_assign_pilot(actor.role, pilot, selection):
                    raise ValidationError(f"User {pilot_id} cannot be assigned as pilot")

            if "status" in changes:
                stamps = stamp_status_timestamps(
                    action.status,
                    changes["status"],
                    completed_at=action.completed_at,
                    validated_at=action.validated_at,
                    now=now,
                )
                if stamps.completed_at is not None:
                    changes["completed_at"] = stamps.completed_at
                if stamps.validated_at is not None:
                    changes["validated_at"] = stamps.validated_at

            updated = replace(action, **changes, updated_at=now)
            await uow.actions.update(updated)

        logger.debug("Action %s updated by %s: %s", action_id, user_id, sorted(changes))
        return updated
