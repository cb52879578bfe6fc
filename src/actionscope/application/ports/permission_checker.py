"""Permission checker port - scope-based authorization of actions."""

from typing import Protocol

from actionscope.domain.entities import CapabilitySet


class PermissionChecker(Protocol):
    """Port for checking what a user may do on an action."""

    async def check(self, user_id: str, action_id: str) -> bool: ...

    async def capabilities(self, user_id: str, action_id: str) -> CapabilitySet: ...
