"""Boundary Protocols: contracts between the service and the store.

Invariants:
    - Services depend on TaskRepository, never on a concrete store class
    - Implementations provided by the shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Synchronous methods: every store call is an in-memory lookup under a lock
"""

from typing import Protocol

from taskboard.core.domain_types import TaskId
from taskboard.core.task import Task


class TaskRepository(Protocol):
    """Structural contract for task stores used by TaskService."""

    def create(self, task: Task) -> Task: ...

    def get_by_id(self, task_id: TaskId) -> Task: ...

    def list_all(self, status_filter: str = "") -> list[Task]: ...

    def update(self, task: Task) -> Task: ...

    def delete(self, task_id: TaskId) -> None: ...

    def count(self) -> int: ...
