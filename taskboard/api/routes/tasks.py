"""Task Routes: CRUD endpoints over the in-memory task store.

Invariants:
    - POST → 201, GET/PUT → 200, DELETE → 204 with empty body
    - Non-integer {task_id} path segments raise InvalidTaskIdError (400)
    - Domain errors propagate to the global handlers (no try/except here)

Design Decisions:
    - Plain def handlers: FastAPI runs them on its thread pool, one worker
      thread per request, all sharing the single store
    - task_id taken as str and parsed here so a malformed id maps to the
      domain InvalidTaskIdError rather than a generic validation error
"""

import logging
import re

from fastapi import APIRouter, Depends, Query, Response, status

from taskboard.api.dependencies import get_task_service
from taskboard.core.domain_types import TaskId
from taskboard.core.errors import InvalidTaskIdError
from taskboard.schemas.task import TaskCreate, TaskResponse, TaskUpdate
from taskboard.services.task_service import TaskService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/tasks", tags=["tasks"])

_TASK_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_MIN_TASK_ID = -(2**63)
_MAX_TASK_ID = 2**63 - 1


def parse_task_id(raw: str) -> TaskId:
    """Parse a 64-bit signed decimal task id or raise InvalidTaskIdError."""
    if not _TASK_ID_PATTERN.fullmatch(raw):
        raise InvalidTaskIdError(raw)
    task_id = int(raw)
    if not _MIN_TASK_ID <= task_id <= _MAX_TASK_ID:
        raise InvalidTaskIdError(raw)
    return TaskId(task_id)


@router.post(
    "", response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_task(
    body: TaskCreate | None = None,
    service: TaskService = Depends(get_task_service),
):
    """Create a new task in pending status. A null body has every field unset."""
    body = body or TaskCreate()
    task = service.create_task(body.title, body.description)
    return TaskResponse.from_task(task)


@router.get("", response_model=list[TaskResponse])
def list_tasks(
    status_filter: str = Query("", alias="status"),
    service: TaskService = Depends(get_task_service),
):
    """List tasks, optionally filtered by exact status."""
    return [
        TaskResponse.from_task(t) for t in service.list_tasks(status_filter)
    ]


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(
    task_id: str, service: TaskService = Depends(get_task_service),
):
    """Get one task."""
    return TaskResponse.from_task(service.get_task(parse_task_id(task_id)))


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(
    task_id: str,
    body: TaskUpdate | None = None,
    service: TaskService = Depends(get_task_service),
):
    """Update title, description and/or status. Empty or null fields are left unchanged."""
    body = body or TaskUpdate()
    task = service.update_task(
        parse_task_id(task_id), body.title, body.description, body.status,
    )
    return TaskResponse.from_task(task)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: str, service: TaskService = Depends(get_task_service),
):
    """Delete a task permanently."""
    service.delete_task(parse_task_id(task_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
