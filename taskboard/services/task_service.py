"""Task Service: validation and merge rules on top of the task store.

Invariants:
    - New tasks always start as pending with created_at == updated_at
    - Non-empty title/description on update re-validated with creation rules
    - Non-empty status on update stored as-is (not checked against TaskStatus)
    - Every failure is logged, then re-raised unchanged

Design Decisions:
    - id_factory and clock injectable: tests pin ids and timestamps
    - Task ids derived from epoch milliseconds; two creates in the same
      millisecond share an id and the second overwrites the first
"""

import logging
import time
from datetime import datetime, timezone
from typing import Callable

from taskboard.core.domain_types import TaskId, TaskStatus
from taskboard.core.errors import TaskboardError
from taskboard.core.repository_protocols import TaskRepository
from taskboard.core.task import Task, merge_task_update
from taskboard.core.validate import check_task_description, check_task_title

logger = logging.getLogger(__name__)


def epoch_millis() -> TaskId:
    return TaskId(time.time_ns() // 1_000_000)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TaskService:
    """Create, read, list, update and delete tasks."""

    def __init__(
        self,
        repository: TaskRepository,
        id_factory: Callable[[], TaskId] = epoch_millis,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._repository = repository
        self._id_factory = id_factory
        self._clock = clock

    def create_task(self, title: str, description: str = "") -> Task:
        try:
            check_task_title(title)
            check_task_description(description)
        except TaskboardError as e:
            logger.warning(
                f"invalid task input: {e.message}",
                extra={"operation": "service.create_task", "error_code": e.code},
            )
            raise

        now = self._clock()
        task = Task(
            id=self._id_factory(),
            title=title,
            description=description,
            status=TaskStatus.PENDING.value,
            created_at=now,
            updated_at=now,
        )
        created = self._repository.create(task)
        logger.info(
            "task created successfully",
            extra={"task_id": created.id, "operation": "service.create_task"},
        )
        return created

    def get_task(self, task_id: TaskId) -> Task:
        task = self._repository.get_by_id(task_id)
        logger.info(
            "task retrieved",
            extra={"task_id": task_id, "operation": "service.get_task"},
        )
        return task

    def list_tasks(self, status_filter: str = "") -> list[Task]:
        tasks = self._repository.list_all(status_filter)
        logger.info(
            "tasks listed",
            extra={
                "count": len(tasks),
                "status_filter": status_filter,
                "operation": "service.list_tasks",
            },
        )
        return tasks

    def update_task(
        self,
        task_id: TaskId,
        new_title: str = "",
        new_description: str = "",
        new_status: str = "",
    ) -> Task:
        """Apply the non-empty fields to an existing task.

        Raises TaskNotFoundError if the task is absent and
        TaskValidationError if a supplied title/description is malformed.
        """
        existing = self._repository.get_by_id(task_id)

        try:
            if new_title:
                check_task_title(new_title)
            if new_description:
                check_task_description(new_description)
        except TaskboardError as e:
            logger.warning(
                f"invalid task update: {e.message}",
                extra={
                    "task_id": task_id,
                    "operation": "service.update_task",
                    "error_code": e.code,
                },
            )
            raise

        merged = merge_task_update(
            existing, new_title, new_description, new_status,
            now=self._clock(),
        )
        updated = self._repository.update(merged)
        logger.info(
            "task updated",
            extra={"task_id": updated.id, "operation": "service.update_task"},
        )
        return updated

    def delete_task(self, task_id: TaskId) -> None:
        self._repository.delete(task_id)
        logger.info(
            "task deleted",
            extra={"task_id": task_id, "operation": "service.delete_task"},
        )
