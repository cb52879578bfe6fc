"""Actor loading shared by use cases."""

from actionscope.application.ports import UnitOfWork
from actionscope.domain.entities import Actor


async def load_actor(uow: UnitOfWork, user_id: str) -> Actor:
    """Snapshot of ``user_id``; unknown users yield a role-less actor that every rule denies."""
    user = await uow.users.get_by_id(user_id)
    if not user:
        return Actor(role=None, id=None)
    return user.as_actor()
