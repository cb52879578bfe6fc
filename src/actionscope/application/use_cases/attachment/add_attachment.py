"""Add attachment use case."""

import logging
from datetime import UTC, datetime
from uuid import uuid4

from actionscope.application.dto.action_dto import AttachmentInput
from actionscope.application.ports import PermissionChecker
from actionscope.domain.entities import Attachment
from actionscope.domain.exceptions import NotFound, PermissionDenied, ValidationError
from actionscope.domain.services import is_read_only

logger = logging.getLogger(__name__)


class AddAttachmentUseCase:
    """Record an attachment on an action for a user holding the attachment capability."""

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
        data: AttachmentInput,
        now: datetime | None = None,
    ) -> Attachment:
        """Store attachment metadata.

        Without an explicit path the object key is ``{user}/{action}/{millis}_{name}``.
        """
        if not data.name or not data.name.strip():
            raise ValidationError("Attachment name is required")
        now = now or datetime.now(UTC)
        capabilities = await self._permission_checker.capabilities(user_id, action_id)

        async with self._uow_factory() as uow:
            action = await uow.actions.get_by_id(action_id)
            if not action:
                raise NotFound("Action", action_id)
            if is_read_only(action):
                raise PermissionDenied("Archived actions are read-only")
            if not capabilities.can_add_attachments:
                logger.info("Attachment on action %s refused for %s", action_id, user_id)
                raise PermissionDenied("User cannot add attachments to this action")

            name = data.name.strip()
            attachment = Attachment(
                id=str(uuid4()),
                action_id=action_id,
                uploaded_by_id=user_id,
                name=name,
                path=data.path or f"{user_id}/{action_id}/{int(now.timestamp() * 1000)}_{name}",
                uploaded_at=now,
            )
            await uow.attachments.add(attachment)

        logger.debug("Attachment %s added to action %s by %s", attachment.id, action_id, user_id)
        return attachment
