"""API test fixtures: fresh task store + FastAPI test client.

Invariants:
    - Every test gets a fresh, empty InMemoryTaskRepository
    - The store singleton is swapped in place (ASGITransport does not run lifespan)
    - Task ids come from a counter so rapid creates never collide
"""

import itertools

import pytest
from httpx import ASGITransport, AsyncClient

import taskboard.infrastructure.task_repository as store_module
from taskboard.api.dependencies import get_task_service
from taskboard.infrastructure.task_repository import InMemoryTaskRepository
from taskboard.main import app
from taskboard.services.task_service import TaskService


@pytest.fixture
def store(monkeypatch):
    repo = InMemoryTaskRepository()
    monkeypatch.setattr(store_module, "task_store", repo)
    return repo


@pytest.fixture
async def client(store):
    """FastAPI test client backed by the per-test store."""
    ids = itertools.count(1)
    app.dependency_overrides[get_task_service] = lambda: TaskService(
        store, id_factory=lambda: next(ids),
    )
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def crash_client(store):
    """Test client that returns 500 responses instead of re-raising app errors."""
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
