"""Task Schemas: wire format for task requests and responses.

Invariants:
    - Missing or null request fields become "" (meaning "unset")
    - Non-string field values rejected by Pydantic (400 via the validation handler)
    - Responses carry id, title, description, status, created_at, updated_at
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator

from taskboard.core.task import Task


class TaskCreate(BaseModel):
    """Create request body."""
    model_config = ConfigDict(strict=True)

    title: str = ""
    description: str = ""

    @field_validator("title", "description", mode="before")
    @classmethod
    def null_as_unset(cls, v: object) -> object:
        return "" if v is None else v


class TaskUpdate(BaseModel):
    """Update request body. Empty fields leave the stored value unchanged."""
    model_config = ConfigDict(strict=True)

    title: str = ""
    description: str = ""
    status: str = ""

    @field_validator("title", "description", "status", mode="before")
    @classmethod
    def null_as_unset(cls, v: object) -> object:
        return "" if v is None else v


class TaskResponse(BaseModel):
    """Public-facing task data."""
    id: int
    title: str
    description: str
    status: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_task(cls, task: Task) -> "TaskResponse":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            status=task.status,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )
