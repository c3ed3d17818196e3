"""Health & Readiness Probes: liveness and readiness endpoints.

Invariants:
    - GET /health always returns 200 if the process is up (liveness)
    - GET /health/ready returns 503 until the task store is initialized (readiness)
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from taskboard.infrastructure import task_repository as store_module

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "taskboard",
        "version": "1.0.0",
    }


@router.get("/ready")
def readiness_check():
    """Readiness probe: includes the task store."""
    store = store_module.task_store
    if store is None:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "store_unavailable"},
        )
    return {
        "status": "ready",
        "checks": {"store": "healthy"},
        "tasks": store.count(),
    }
