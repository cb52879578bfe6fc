"""Repository ports."""

from actionscope.application.ports.repositories.action_repository import ActionRepository
from actionscope.application.ports.repositories.attachment_repository import (
    AttachmentRepository,
)
from actionscope.application.ports.repositories.user_repository import UserRepository

__all__ = [
    "ActionRepository",
    "AttachmentRepository",
    "UserRepository",
]
