"""Request Logging Middleware: one structured log line per HTTP request.

Invariants:
    - Every request logged with method, path, status code and duration
    - Exceptions are logged as status 500 and re-raised for the error handlers
"""

import logging
import time

from fastapi import FastAPI, Request

logger = logging.getLogger(__name__)


def register_request_logging(app: FastAPI) -> None:
    """Attach the request logging middleware to the app."""

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            _log_request(request, 500, started)
            raise
        _log_request(request, response.status_code, started)
        return response


def _log_request(request: Request, status_code: int, started: float) -> None:
    logger.info(
        f"{request.method} {request.url.path} {status_code}",
        extra={
            "http_method": request.method,
            "path": request.url.path,
            "status_code": status_code,
            "duration_ms": round((time.perf_counter() - started) * 1000, 2),
        },
    )
