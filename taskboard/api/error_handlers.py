"""Error Handlers: map every failure onto the TaskboardError response envelope.

Invariants:
    - Every error body is produced by TaskboardError.to_response()
      (code, message, category, severity, timestamp)
    - Malformed JSON and wrong field types become RequestBodyError (400)
    - Anything else becomes InternalError (500); the cause is only logged
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from taskboard.core.errors import InternalError, RequestBodyError, TaskboardError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(TaskboardError, handle_taskboard_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


def _render(error: TaskboardError) -> JSONResponse:
    return JSONResponse(status_code=error.http_status, content=error.to_response())


async def handle_taskboard_error(request: Request, exc: TaskboardError):
    logger.warning(
        f"{exc.code}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return _render(exc)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError,
):
    error = RequestBodyError(_field_details(exc))
    logger.warning(
        f"Invalid request body on {request.url.path}",
        extra={"error_code": error.code, "path": request.url.path},
    )
    return _render(error)


async def handle_unexpected_error(request: Request, exc: Exception):
    error = InternalError()
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        extra={"error_code": error.code, "path": request.url.path},
        exc_info=exc,
    )
    return _render(error)


def _field_details(exc: RequestValidationError) -> list[dict]:
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
