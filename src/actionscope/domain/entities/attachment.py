"""Attachment entity."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Attachment:
    """File attached to an action; the binary lives in the object store at ``path``."""

    id: str
    action_id: str
    uploaded_by_id: str | None
    name: str
    path: str
    uploaded_at: datetime | None = None
