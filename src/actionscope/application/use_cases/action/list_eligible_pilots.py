"""List eligible pilots use case."""

from actionscope.application.use_cases.actor import load_actor
from actionscope.domain.entities import User
from actionscope.domain.services import eligible_pilots
from actionscope.domain.value_objects import Placement


class ListEligiblePilotsUseCase:
    """Users the current user may assign as pilot for a given placement."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, user_id: str, selection: Placement) -> list[User]:
        async with self._uow_factory() as uow:
            actor = await load_actor(uow, user_id)
            users = await uow.users.list_active()
        return eligible_pilots(actor.role, users, selection)
