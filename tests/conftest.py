"""Pytest fixtures for ActionScope tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import pytest

from actionscope.domain.entities import Action, Actor, Attachment, User
from actionscope.domain.value_objects import ActionStatus, Placement, Role


# --- Builders ---


def make_actor(
    role: Role | str | None,
    id: str | None = "u1",
    service_id: str | None = None,
    line_id: str | None = None,
    team_id: str | None = None,
    post_id: str | None = None,
) -> Actor:
    return Actor(
        role=Role.parse(role),
        id=id,
        placement=Placement(service_id, line_id, team_id, post_id),
    )


def make_action(
    pilot_id: str | None = "u9",
    created_by_id: str | None = "u8",
    status: ActionStatus = ActionStatus.IN_PROGRESS,
    service_id: str | None = None,
    line_id: str | None = None,
    team_id: str | None = None,
    post_id: str | None = None,
    id: str = "a1",
    **kwargs,
) -> Action:
    return Action(
        id=id,
        pilot_id=pilot_id,
        created_by_id=created_by_id,
        status=status,
        placement=Placement(service_id, line_id, team_id, post_id),
        **kwargs,
    )


def make_user(
    id: str,
    role: Role,
    service_id: str | None = None,
    line_id: str | None = None,
    team_id: str | None = None,
    post_id: str | None = None,
    is_active: bool = True,
) -> User:
    return User(
        id=id,
        role=role,
        placement=Placement(service_id, line_id, team_id, post_id),
        is_active=is_active,
    )


# --- Fake repositories ---


class FakeActionRepository:
    """In-memory action repository."""

    def __init__(self) -> None:
        self._by_id: dict[str, Action] = {}
        self.updates: list[Action] = []

    async def get_by_id(self, action_id: str) -> Action | None:
        return self._by_id.get(action_id)

    async def list_by_status(self, status: ActionStatus) -> list[Action]:
        return [a for a in self._by_id.values() if a.status == status]

    async def update(self, action: Action) -> None:
        self._by_id[action.id] = action
        self.updates.append(action)

    def add(self, action: Action) -> None:
        """Helper to seed an action for tests."""
        self._by_id[action.id] = action


class FakeUserRepository:
    """In-memory user repository."""

    def __init__(self) -> None:
        self._by_id: dict[str, User] = {}

    async def get_by_id(self, user_id: str) -> User | None:
        return self._by_id.get(user_id)

    async def list_active(self) -> list[User]:
        return [u for u in self._by_id.values() if u.is_active]

    def add(self, user: User) -> None:
        """Helper to seed a user for tests."""
        self._by_id[user.id] = user


class FakeAttachmentRepository:
    """In-memory attachment repository."""

    def __init__(self) -> None:
        self._by_id: dict[str, Attachment] = {}

    async def get_by_id(self, attachment_id: str) -> Attachment | None:
        return self._by_id.get(attachment_id)

    async def add(self, attachment: Attachment) -> None:
        self._by_id[attachment.id] = attachment

    async def delete(self, attachment_id: str) -> None:
        self._by_id.pop(attachment_id, None)

    def seed(self, attachment: Attachment) -> None:
        """Helper to seed an attachment for tests."""
        self._by_id[attachment.id] = attachment


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.actions = FakeActionRepository()
        self.users = FakeUserRepository()
        self.attachments = FakeAttachmentRepository()
        self.committed = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        pass


def factory_for(uow: FakeUnitOfWork):
    """UoW factory yielding the same UoW on every call."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield uow

    return _factory


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """UoW seeded with a small factory organization.

    S1 > L1 > T1 > P1, S1 > L2 > T2, S2 > L3.
    """
    uow = FakeUnitOfWork()
    for user in [
        make_user("op-pilot", Role.OPERATOR, "S1", "L1", "T1", "P1"),
        make_user("op-other", Role.OPERATOR, "S1", "L1", "T1", "P1"),
        make_user("op-l2", Role.OPERATOR, "S1", "L2", "T2"),
        make_user("op-inactive", Role.OPERATOR, "S1", "L1", "T1", "P1", is_active=False),
        make_user("tl-1", Role.TEAM_LEADER, "S1", "L1", "T1"),
        make_user("sup-1", Role.SUPERVISOR, "S1", "L1"),
        make_user("sup-2", Role.SUPERVISOR, "S2", "L3"),
        make_user("mgr-1", Role.MANAGER, "S1"),
        make_user("mgr-2", Role.MANAGER, "S2"),
        make_user("adm", Role.ADMIN),
    ]:
        uow.users.add(user)
    uow.actions.add(
        make_action(
            id="a1",
            pilot_id="op-pilot",
            created_by_id="tl-1",
            status=ActionStatus.IN_PROGRESS,
            service_id="S1",
            line_id="L1",
            team_id="T1",
            post_id="P1",
            title="Fix conveyor guard",
        )
    )
    uow.actions.add(
        make_action(
            id="a-archived",
            pilot_id="op-pilot",
            created_by_id="tl-1",
            status=ActionStatus.ARCHIVED,
            service_id="S1",
            line_id="L1",
            team_id="T1",
            post_id="P1",
        )
    )
    uow.actions.add(
        make_action(
            id="a-archived-s2",
            pilot_id="sup-2",
            created_by_id="mgr-2",
            status=ActionStatus.ARCHIVED,
            service_id="S2",
            line_id="L3",
        )
    )
    uow.attachments.seed(
        Attachment(
            id="att-1",
            action_id="a1",
            uploaded_by_id="op-pilot",
            name="photo.jpg",
            path="a1/photo.jpg",
        )
    )
    uow.attachments.seed(
        Attachment(
            id="att-archived",
            action_id="a-archived",
            uploaded_by_id="op-pilot",
            name="report.pdf",
            path="a-archived/report.pdf",
        )
    )
    return uow


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager with the seeded FakeUnitOfWork."""
    return factory_for(fake_uow)


@pytest.fixture
def permission_checker(uow_factory):
    """Scope permission checker over the seeded FakeUnitOfWork."""
    from actionscope.infrastructure.permission.permission_checker import ScopePermissionChecker

    return ScopePermissionChecker(uow_factory)


@pytest.fixture
def mock_permission_checker():
    """AsyncMock for PermissionChecker - allows by default."""
    from unittest.mock import AsyncMock

    mock = AsyncMock()
    mock.check.return_value = True
    return mock


def pytest_collection_modifyitems(items: list) -> None:
    """Run API tests after unit tests."""
    api, other = [], []
    for item in items:
        if "/api/" in item.nodeid or "\\api\\" in item.nodeid:
            api.append(item)
        else:
            other.append(item)
    if api:
        items[:] = other + api
