"""Get action permissions use case."""

from actionscope.application.dto.action_dto import ActionPermissionsOutput
from actionscope.application.ports import PermissionChecker
from actionscope.domain.exceptions import NotFound
from actionscope.domain.services import is_read_only


class GetActionPermissionsUseCase:
    """Resolve what a user may do on an action."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(self, user_id: str, action_id: str) -> ActionPermissionsOutput:
        async with self._uow_factory() as uow:
            action = await uow.actions.get_by_id(action_id)
            if not action:
                raise NotFound("Action", action_id)

        return ActionPermissionsOutput(
            action_id=action.id,
            can_edit=await self._permission_checker.check(user_id, action_id),
            read_only=is_read_only(action),
            capabilities=await self._permission_checker.capabilities(user_id, action_id),
        )
