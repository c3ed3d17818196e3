"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - TaskId wraps int: negative values are rejected by the store
    - Known statuses encoded as a str Enum; stored status stays a plain str
      because update accepts arbitrary non-empty values

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: serializes to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

TaskId = NewType("TaskId", int)


# ─── Enums ───────────────────────────────────────────────────────

class TaskStatus(str, Enum):
    """Task lifecycle tags. Transitions are unconstrained."""
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


# ─── Constants ───────────────────────────────────────────────────

MIN_TASK_TITLE_LENGTH = 3
MAX_TASK_TITLE_LENGTH = 200
MAX_TASK_DESCRIPTION_LENGTH = 5000
