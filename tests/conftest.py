"""Pytest configuration and fixtures."""

from datetime import UTC, datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from inventory.api.dependencies import get_store
from inventory.main import app
from inventory.services.store import Store

START = datetime(2024, 1, 1, tzinfo=UTC)


class TickingClock:
    """Clock that moves one second forward on every call."""

    def __init__(self, start: datetime = START, step: timedelta = timedelta(seconds=1)):
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        now = self.current
        self.current += self.step
        return now


@pytest.fixture
def db_path(tmp_path):
    """Path of a store file that does not exist yet."""
    return tmp_path / "db.json"


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def store(db_path, clock):
    """A fresh, empty store backed by a temp file."""
    return Store(db_path, clock=clock)


@pytest.fixture
def client(store):
    """Create a test client with the store dependency overridden."""
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
