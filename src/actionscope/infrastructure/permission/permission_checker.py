"""Permission checker implementation - loads snapshots and applies the scope rules."""

from actionscope.application.use_cases.actor import load_actor
from actionscope.domain.entities import READ_ONLY, CapabilitySet
from actionscope.domain.services import can_open_for_edit, capabilities_for


class ScopePermissionChecker:
    """Checks edit rights on actions from stored user and action records."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def check(self, user_id: str, action_id: str) -> bool:
        """Check if user may open the action for editing."""
        async with self._uow_factory() as uow:
            action = await uow.actions.get_by_id(action_id)
            if not action:
                return False
            actor = await load_actor(uow, user_id)
        return can_open_for_edit(actor, action)

    async def capabilities(self, user_id: str, action_id: str) -> CapabilitySet:
        """Field-level capabilities of user on the action; read-only when unknown."""
        async with self._uow_factory() as uow:
            action = await uow.actions.get_by_id(action_id)
            if not action:
                return READ_ONLY
            actor = await load_actor(uow, user_id)
        return capabilities_for(actor, action)
