"""Field Validation: title and description shape checks.

Invariants:
    - Lengths are counted in characters (code points), not bytes
    - Title alphabet: Latin and Cyrillic letters, digits, ASCII whitespace, . , ! ? -
    - Description may be empty; only its upper bound is checked
"""

import re

from taskboard.core.domain_types import (
    MAX_TASK_DESCRIPTION_LENGTH, MAX_TASK_TITLE_LENGTH, MIN_TASK_TITLE_LENGTH,
)
from taskboard.core.errors import TaskValidationError

# Whitespace limited to ASCII space, tab, newline, carriage return and form feed.
_TASK_TITLE_PATTERN = re.compile(r"[A-Za-z0-9А-Яа-я \t\n\r\f.,!?-]+")


def check_task_title(title: str) -> None:
    """Raise TaskValidationError unless title is a well-formed task title."""
    if title == "":
        raise TaskValidationError("task title cannot be empty", "title")

    length = len(title)
    if length < MIN_TASK_TITLE_LENGTH:
        raise TaskValidationError(
            f"task title must be at least {MIN_TASK_TITLE_LENGTH} characters",
            "title",
        )
    if length > MAX_TASK_TITLE_LENGTH:
        raise TaskValidationError(
            f"task title cannot be longer than {MAX_TASK_TITLE_LENGTH} characters",
            "title",
        )
    if not _TASK_TITLE_PATTERN.fullmatch(title):
        raise TaskValidationError(
            "task title contains invalid characters", "title",
        )


def check_task_description(description: str) -> None:
    """Raise TaskValidationError if description exceeds the length limit."""
    if len(description) > MAX_TASK_DESCRIPTION_LENGTH:
        raise TaskValidationError(
            "task description cannot be longer than "
            f"{MAX_TASK_DESCRIPTION_LENGTH} characters",
            "description",
        )
