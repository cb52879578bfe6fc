"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from actionscope.interfaces.api.app import create_app


@pytest.fixture
def app(uow_factory):
    """Falcon ASGI app with the data-store routes mounted on the fake UoW."""
    return create_app(
        unit_of_work_factory=uow_factory,
        cors_origins=["http://localhost:5173"],
    )


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)


@pytest.fixture
def snapshot_client() -> TestClient:
    """Client for an app without a data store."""
    return TestClient(create_app())
