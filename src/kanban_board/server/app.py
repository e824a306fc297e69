"""
Board API application factory.

The application receives an already opened ``ORMManager``; whoever opened it
closes it. The service executor is owned by the application and shut down
with it.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from kanban_board import __version__
from kanban_board.config import DEFAULT_CORS_ORIGIN, DEFAULT_WORKERS, Settings
from kanban_board.database.orm_manager import ORMManager
from kanban_board.server.errors import (
    SERVER_ERROR_MESSAGE,
    error_response,
    sanitize_error_message,
)
from kanban_board.server.routes import create_board_router
from kanban_board.server.service_executor import ServiceExecutor
from kanban_board.services import ServiceFactory

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Health report fields served over HTTP; the database URL is never among them.
PUBLIC_HEALTH_FIELDS = ("healthy", "tables", "table_count")


def configure_logging(debug: bool = False) -> None:
    """Configure root logging for the server process."""
    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO, format=LOG_FORMAT)


def _validation_message(exc: RequestValidationError) -> str:
    """Describe the first validation problem, naming the offending field."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = [str(part) for part in first.get("loc", ()) if part != "body"]
    field = ".".join(location) or "body"
    return f'"{field}" {first.get("msg", "is invalid")}'


def create_app(orm_manager: ORMManager, settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        orm_manager: Open ORM manager shared by all requests.
        settings: Server settings; only CORS and worker count are read here.

    Returns:
        Configured FastAPI app.
    """
    cors_origin = settings.cors_origin if settings else DEFAULT_CORS_ORIGIN
    workers = settings.workers if settings else DEFAULT_WORKERS

    factory = ServiceFactory(orm_manager)
    executor = ServiceExecutor(factory, max_workers=workers)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Kanban board API %s starting", __version__)
        try:
            yield
        finally:
            executor.close()
            logger.info("Kanban board API stopped")

    app = FastAPI(
        title="Kanban Board API",
        description="Projects and staged tasks for a kanban board",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.executor = executor

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[cors_origin],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return error_response(422, _validation_message(exc))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled error on %s %s: %s",
            request.method,
            request.url.path,
            sanitize_error_message(f"{type(exc).__name__}: {exc}"),
        )
        return error_response(500, SERVER_ERROR_MESSAGE)

    @app.get("/health")
    async def health() -> JSONResponse:
        report: Any = await executor.run(orm_manager.perform_health_check)
        if report.get("healthy"):
            return JSONResponse(content={key: report[key] for key in PUBLIC_HEALTH_FIELDS})
        logger.warning(
            "Health check failed: %s", sanitize_error_message(str(report.get("error", "")))
        )
        return error_response(503, "Database unavailable")

    app.include_router(create_board_router(executor))

    return app
