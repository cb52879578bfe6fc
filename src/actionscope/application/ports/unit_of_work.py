"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from actionscope.application.ports.repositories.action_repository import ActionRepository
from actionscope.application.ports.repositories.attachment_repository import (
    AttachmentRepository,
)
from actionscope.application.ports.repositories.user_repository import UserRepository


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def actions(self) -> ActionRepository: ...

    @property
    def users(self) -> UserRepository: ...

    @property
    def attachments(self) -> AttachmentRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
