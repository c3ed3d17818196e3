"""In-Memory Task Store: CRUD semantics and concurrency.

Tests cover:
    - create stamps both timestamps, rejects negative ids, overwrites silently
    - get_by_id / update / delete raise TaskNotFoundError for unknown ids
    - list_all with and without a status filter
    - update preserves created_at and only touches title/description/status
    - returned tasks are snapshots, not the stored objects
    - parallel creates and mixed readers/writers
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta, timezone

import pytest

from taskboard.core.errors import InvalidTaskIdError, TaskNotFoundError
from taskboard.core.task import Task
from taskboard.infrastructure.task_repository import InMemoryTaskRepository

T0 = datetime(2026, 1, 1, tzinfo=timezone.utc)


def _task(task_id: int, title: str = "Test task", status: str = "pending") -> Task:
    return Task(
        id=task_id, title=title, description="", status=status,
        created_at=T0, updated_at=T0,
    )


class _StepClock:
    """Deterministic clock: each call advances one second."""

    def __init__(self):
        self.now = T0

    def __call__(self):
        self.now += timedelta(seconds=1)
        return self.now


@pytest.fixture
def repo():
    return InMemoryTaskRepository()


def test_create_stamps_both_timestamps_equal():
    repo = InMemoryTaskRepository(clock=_StepClock())
    created = repo.create(_task(1))
    assert created.created_at == created.updated_at == T0 + timedelta(seconds=1)


def test_create_rejects_negative_id(repo):
    with pytest.raises(InvalidTaskIdError):
        repo.create(_task(-1))
    assert repo.count() == 0


def test_create_accepts_zero_id(repo):
    assert repo.create(_task(0)).id == 0


def test_create_overwrites_existing_id(repo):
    repo.create(_task(1, title="First"))
    repo.create(_task(1, title="Second"))
    assert repo.count() == 1
    assert repo.get_by_id(1).title == "Second"


def test_get_by_id_returns_stored_task(repo):
    repo.create(_task(5, title="Find me"))
    assert repo.get_by_id(5).title == "Find me"


def test_get_by_id_unknown_raises(repo):
    with pytest.raises(TaskNotFoundError) as exc:
        repo.get_by_id(404)
    assert exc.value.task_id == 404


def test_list_all_without_filter_returns_everything(repo):
    repo.create(_task(1, status="pending"))
    repo.create(_task(2, status="completed"))
    repo.create(_task(3, status="in_progress"))
    assert {t.id for t in repo.list_all()} == {1, 2, 3}
    assert {t.id for t in repo.list_all("")} == {1, 2, 3}


def test_list_all_with_filter_returns_exact_subset(repo):
    repo.create(_task(1, status="pending"))
    repo.create(_task(2, status="completed"))
    repo.create(_task(3, status="pending"))
    pending = repo.list_all("pending")
    assert {t.id for t in pending} == {1, 3}
    assert all(t.status == "pending" for t in pending)


def test_list_all_empty_store(repo):
    assert repo.list_all() == []
    assert repo.list_all("completed") == []


def test_update_overwrites_fields_and_preserves_created_at():
    repo = InMemoryTaskRepository(clock=_StepClock())
    created = repo.create(_task(1))
    changed = _task(1, title="Changed", status="completed")
    changed.description = "now with text"
    changed.created_at = T0 - timedelta(days=30)

    updated = repo.update(changed)

    assert updated.title == "Changed"
    assert updated.description == "now with text"
    assert updated.status == "completed"
    assert updated.created_at == created.created_at
    assert updated.updated_at > created.updated_at


def test_update_unknown_raises(repo):
    with pytest.raises(TaskNotFoundError):
        repo.update(_task(99))
    assert repo.count() == 0


def test_delete_removes_task(repo):
    repo.create(_task(1))
    repo.delete(1)
    with pytest.raises(TaskNotFoundError):
        repo.get_by_id(1)


def test_delete_unknown_raises_without_side_effect(repo):
    repo.create(_task(1))
    with pytest.raises(TaskNotFoundError):
        repo.delete(2)
    assert repo.count() == 1


def test_reads_return_snapshots(repo):
    repo.create(_task(1, title="Stored"))
    fetched = repo.get_by_id(1)
    fetched.title = "Mutated outside the lock"
    assert repo.get_by_id(1).title == "Stored"


def test_concurrent_creates_all_retrievable(repo):
    n = 200
    with ThreadPoolExecutor(max_workers=16) as pool:
        list(pool.map(lambda i: repo.create(_task(i + 1)), range(n)))
    tasks = repo.list_all("")
    assert len(tasks) == n
    assert {t.id for t in tasks} == set(range(1, n + 1))


def test_concurrent_readers_and_writers(repo):
    for i in range(50):
        repo.create(_task(i))

    def work(i: int):
        if i % 3 == 0:
            repo.update(_task(i % 50, title="Updated", status="completed"))
        elif i % 3 == 1:
            repo.list_all("completed")
        else:
            repo.get_by_id(i % 50)

    with ThreadPoolExecutor(max_workers=16) as pool:
        list(pool.map(work, range(300)))

    assert repo.count() == 50
    for task in repo.list_all("completed"):
        assert task.title == "Updated"
        assert task.updated_at >= task.created_at
