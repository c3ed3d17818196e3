"""FastAPI Dependencies: wiring between routes and the service layer.

Invariants:
    - get_task_service raises if the store was never initialized (lifespan not run)

Design Decisions:
    - Store looked up at call time: tests swap it via dependency_overrides
      or by replacing the singleton
"""

from taskboard.infrastructure import task_repository as store_module
from taskboard.services.task_service import TaskService


def get_task_service() -> TaskService:
    """FastAPI dependency for the task service."""
    if store_module.task_store is None:
        raise RuntimeError("Task store not initialized")
    return TaskService(store_module.task_store)
