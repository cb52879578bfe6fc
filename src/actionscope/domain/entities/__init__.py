"""Domain entities."""

from actionscope.domain.entities.action import Action
from actionscope.domain.entities.actor import Actor
from actionscope.domain.entities.attachment import Attachment
from actionscope.domain.entities.capability_set import READ_ONLY, CapabilitySet
from actionscope.domain.entities.user import User

__all__ = [
    "READ_ONLY",
    "Action",
    "Actor",
    "Attachment",
    "CapabilitySet",
    "User",
]
