"""User entity."""

from dataclasses import dataclass, field

from actionscope.domain.entities.actor import Actor
from actionscope.domain.value_objects import Placement, Role


@dataclass
class User:
    """User profile as stored by the data layer."""

    id: str
    role: Role | None
    placement: Placement = field(default_factory=Placement)
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    is_active: bool = True

    def as_actor(self) -> Actor:
        """Snapshot used for authorization decisions."""
        return Actor(role=self.role, id=self.id, placement=self.placement)
