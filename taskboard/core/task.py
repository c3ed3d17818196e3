"""Task Entity: the single domain record and its partial-update merge rule.

Invariants:
    - updated_at >= created_at always
    - created_at never changes after creation
    - merge_task_update never mutates its input (returns a new Task)

Design Decisions:
    - Fetch-merge-store expressed as an explicit pure merge function:
      the store hands out snapshots, so the service computes a new value
      and writes it back under the lock
    - Empty string means "leave unchanged" for every mergeable field
"""

from dataclasses import dataclass, replace
from datetime import datetime


@dataclass
class Task:
    """One task record. Plain dataclass, no IO."""
    id: int
    title: str
    description: str
    status: str
    created_at: datetime
    updated_at: datetime


def merge_task_update(
    existing: Task,
    title: str = "",
    description: str = "",
    status: str = "",
    *,
    now: datetime,
) -> Task:
    """Return a copy of existing with every non-empty field applied.

    Validation is the caller's job; this only merges.
    """
    return replace(
        existing,
        title=title or existing.title,
        description=description or existing.description,
        status=status or existing.status,
        updated_at=max(now, existing.created_at),
    )
