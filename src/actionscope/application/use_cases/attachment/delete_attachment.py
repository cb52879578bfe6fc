"""Delete attachment use case."""

import logging

from actionscope.application.use_cases.actor import load_actor
from actionscope.domain.exceptions import NotFound, PermissionDenied
from actionscope.domain.services import can_delete_attachment, is_read_only

logger = logging.getLogger(__name__)


class DeleteAttachmentUseCase:
    """Remove an attachment. Allowed to its uploader, managers and admins."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, user_id: str, attachment_id: str) -> None:
        async with self._uow_factory() as uow:
            attachment = await uow.attachments.get_by_id(attachment_id)
            if not attachment:
                raise NotFound("Attachment", attachment_id)
            actor = await load_actor(uow, user_id)
            if not can_delete_attachment(actor, attachment):
                logger.info("Delete of attachment %s refused for %s", attachment_id, user_id)
                raise PermissionDenied("User cannot delete this attachment")

            action = await uow.actions.get_by_id(attachment.action_id)
            if action and is_read_only(action):
                raise PermissionDenied("Archived actions are read-only")

            await uow.attachments.delete(attachment_id)
