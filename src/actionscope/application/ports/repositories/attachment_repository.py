"""Attachment repository port."""

from typing import Protocol

from actionscope.domain.entities import Attachment


class AttachmentRepository(Protocol):
    """Port for attachment metadata; file transfer to the object store is the adapter's job."""

    async def get_by_id(self, attachment_id: str) -> Attachment | None: ...

    async def add(self, attachment: Attachment) -> None: ...

    async def delete(self, attachment_id: str) -> None: ...
