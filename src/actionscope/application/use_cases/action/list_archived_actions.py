"""List archived actions use case."""

from actionscope.application.use_cases.actor import load_actor
from actionscope.domain.entities import Action
from actionscope.domain.services import can_view_archived
from actionscope.domain.value_objects import ActionStatus


class ListArchivedActionsUseCase:
    """Archived actions visible to the current user."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, user_id: str) -> list[Action]:
        async with self._uow_factory() as uow:
            actor = await load_actor(uow, user_id)
            archived = await uow.actions.list_by_status(ActionStatus.ARCHIVED)
        return [a for a in archived if can_view_archived(actor, a)]
