"""In-Memory Task Store: the canonical collection of tasks for this process.

Invariants:
    - One dict keyed by task id, guarded by one ReadWriteLock
    - Every operation holds the lock for its whole duration, released on all paths
    - Negative ids rejected on create; absent ids raise TaskNotFoundError
    - create() silently overwrites an existing id (no uniqueness check)
    - update() preserves created_at from the stored entry

Design Decisions:
    - Reads return snapshots (dataclasses.replace), not the stored objects:
      callers cannot mutate the collection outside the lock
    - Singleton task_store initialized on startup: FastAPI lifespan manages lifecycle
      (no global import side effects)
    - No persistence step: the store is discarded with the process
"""

import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable

from taskboard.core.domain_types import TaskId
from taskboard.core.errors import InvalidTaskIdError, TaskNotFoundError
from taskboard.core.task import Task
from taskboard.infrastructure.locking import ReadWriteLock

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryTaskRepository:
    """Thread-safe task store backed by a dict."""

    def __init__(self, clock: Callable[[], datetime] = _utc_now) -> None:
        self._tasks: dict[int, Task] = {}
        self._lock = ReadWriteLock()
        self._clock = clock

    def create(self, task: Task) -> Task:
        with self._lock.write_locked():
            if task.id < 0:
                logger.warning(
                    "invalid task ID",
                    extra={"task_id": task.id, "operation": "repository.create"},
                )
                raise InvalidTaskIdError(task.id)

            now = self._clock()
            stored = replace(task, created_at=now, updated_at=now)
            self._tasks[stored.id] = stored

            logger.info(
                "task created",
                extra={"task_id": stored.id, "operation": "repository.create"},
            )
            return replace(stored)

    def get_by_id(self, task_id: TaskId) -> Task:
        with self._lock.read_locked():
            task = self._tasks.get(task_id)
            if task is None:
                logger.warning(
                    "task not found",
                    extra={"task_id": task_id, "operation": "repository.get_by_id"},
                )
                raise TaskNotFoundError(task_id)

            logger.info(
                "task retrieved",
                extra={"task_id": task_id, "operation": "repository.get_by_id"},
            )
            return replace(task)

    def list_all(self, status_filter: str = "") -> list[Task]:
        """Return all tasks, or only those whose status equals status_filter."""
        with self._lock.read_locked():
            tasks = [
                replace(task) for task in self._tasks.values()
                if not status_filter or task.status == status_filter
            ]
            logger.info(
                "tasks list retrieved",
                extra={
                    "count": len(tasks),
                    "status_filter": status_filter,
                    "operation": "repository.list_all",
                },
            )
            return tasks

    def update(self, task: Task) -> Task:
        with self._lock.write_locked():
            existing = self._tasks.get(task.id)
            if existing is None:
                logger.warning(
                    "task not found for update",
                    extra={"task_id": task.id, "operation": "repository.update"},
                )
                raise TaskNotFoundError(task.id)

            existing.title = task.title
            existing.description = task.description
            existing.status = task.status
            existing.updated_at = max(self._clock(), existing.created_at)

            logger.info(
                "task updated",
                extra={"task_id": task.id, "operation": "repository.update"},
            )
            return replace(existing)

    def delete(self, task_id: TaskId) -> None:
        with self._lock.write_locked():
            if task_id not in self._tasks:
                logger.warning(
                    "task not found for deletion",
                    extra={"task_id": task_id, "operation": "repository.delete"},
                )
                raise TaskNotFoundError(task_id)

            del self._tasks[task_id]
            logger.info(
                "task deleted",
                extra={"task_id": task_id, "operation": "repository.delete"},
            )

    def count(self) -> int:
        with self._lock.read_locked():
            return len(self._tasks)


# Singleton (initialized on startup)
task_store: InMemoryTaskRepository | None = None


def init_store() -> InMemoryTaskRepository:
    global task_store
    task_store = InMemoryTaskRepository()
    return task_store


def close_store() -> None:
    """Drop the store on shutdown. Tasks are not persisted."""
    global task_store
    task_store = None
