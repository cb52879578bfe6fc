"""Actor - the authenticated user an authorization decision is made for."""

from dataclasses import dataclass, field

from actionscope.domain.value_objects import Placement, Role


@dataclass(frozen=True)
class Actor:
    """Immutable snapshot of the current user: role, id and placement.

    ``role`` and ``id`` may be None for an incomplete profile; every decision
    then fails closed.
    """

    role: Role | None
    id: str | None
    placement: Placement = field(default_factory=Placement)
