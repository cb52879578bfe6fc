"""User repository port."""

from typing import Protocol

from actionscope.domain.entities import User


class UserRepository(Protocol):
    """Port for user profile lookup (external data store)."""

    async def get_by_id(self, user_id: str) -> User | None: ...

    async def list_active(self) -> list[User]: ...
