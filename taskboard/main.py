"""Taskboard API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TaskboardError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Task store created on startup and dropped on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Graceful shutdown delegated to uvicorn: SIGINT/SIGTERM stop accepting
      connections and in-flight requests drain up to shutdown_timeout_seconds
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskboard.api.error_handlers import register_error_handlers
from taskboard.api.middleware import register_request_logging
from taskboard.api.routes import health, tasks
from taskboard.config import get_settings
from taskboard.infrastructure.observability import setup_logging
from taskboard.infrastructure.task_repository import close_store, init_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_store()
    logger.info("Taskboard API started")
    yield
    logger.info("Taskboard API shutting down")
    close_store()


app = FastAPI(title="Taskboard API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_request_logging(app)
register_error_handlers(app)

app.include_router(health.router)
app.include_router(tasks.router)


def run() -> None:
    """Serve the app with uvicorn using the configured host and port."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        f"starting HTTP server on http://{settings.server_host}:{settings.server_port}",
    )
    uvicorn.run(
        app,
        host=settings.server_host,
        port=settings.server_port,
        timeout_graceful_shutdown=settings.shutdown_timeout_seconds,
        log_config=None,
    )
    logger.info("server stopped")


if __name__ == "__main__":
    run()
