"""Error Hierarchy: typed, categorized exceptions for all Taskboard failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Three domain kinds only: not found, invalid id, validation (all 400-level)
    - RequestBodyError and InternalError exist only for the API layer, so every
      error response shares one envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with TaskboardError base: one FastAPI handler catches all
    - Errors propagate unchanged from store through service to transport (no wrapping)
"""

from datetime import datetime, timezone
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


class TaskboardError(Exception):
    """Base exception for all Taskboard errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
        details: list[dict] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.details = details
        self.timestamp = datetime.now(timezone.utc)

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        body = {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.timestamp.isoformat(),
            }
        }
        if self.details is not None:
            body["error"]["details"] = self.details
        return body


# ─── Domain Errors (400-level) ──────────────────────────────────

class TaskNotFoundError(TaskboardError):
    """Requested task does not exist."""
    def __init__(self, task_id: int):
        super().__init__(
            "task not found", "TASK_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.ERROR, 404,
        )
        self.task_id = task_id


class InvalidTaskIdError(TaskboardError):
    """Task identifier is negative or malformed."""
    def __init__(self, raw_id: object):
        super().__init__(
            "invalid task ID", "INVALID_TASK_ID",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, 400,
        )
        self.raw_id = raw_id


class TaskValidationError(TaskboardError):
    """Task field failed a shape check (title or description)."""
    def __init__(self, message: str, field: str):
        super().__init__(
            f"validation error: {message}", "VALIDATION_ERROR",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, 400,
        )
        self.field = field


class RequestBodyError(TaskboardError):
    """Request body is not valid JSON or has fields of the wrong type."""
    def __init__(self, details: list[dict]):
        super().__init__(
            "Invalid request data", "VALIDATION_ERROR",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, 400, details,
        )


# ─── Internal Errors (500-level) ────────────────────────────────

class InternalError(TaskboardError):
    """Anything outside the domain hierarchy. The cause is never exposed."""
    def __init__(self):
        super().__init__(
            "An unexpected error occurred", "INTERNAL_ERROR",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL, 500,
        )
