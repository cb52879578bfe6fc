"""Action repository port."""

from typing import Protocol

from actionscope.domain.entities import Action
from actionscope.domain.value_objects import ActionStatus


class ActionRepository(Protocol):
    """Port for action persistence (external data store)."""

    async def get_by_id(self, action_id: str) -> Action | None: ...

    async def list_by_status(self, status: ActionStatus) -> list[Action]: ...

    async def update(self, action: Action) -> None: ...
