# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Study App API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python scripts/start_server.py
# =============================================================================

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import Settings, get_settings
from app.exceptions import (
    StudyAppException,
    route_not_found_handler,
    storage_exception_handler,
    study_app_exception_handler,
    unexpected_exception_handler,
    validation_exception_handler,
)
from app.routers import health, users
from app.routers.health import API_VERSION
from core.schema import init_schema
from lib.database import StorageClient, StorageError

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    The storage client is created here and owned by the lifespan: connected
    on startup, closed on shutdown. A database that is down at startup is
    logged and reported by /health instead of stopping the process.

    Args:
        settings: Settings to use (defaults to the cached environment settings)

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    options = settings.response_options

    storage = StorageClient(
        settings.DATABASE_URL,
        min_size=settings.DB_POOL_MIN_SIZE,
        max_size=settings.DB_POOL_MAX_SIZE,
        max_idle_seconds=settings.DB_POOL_MAX_IDLE_SECONDS,
        log_queries=options.log_queries,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan handler.

        - Startup: connect storage, create the users table if configured
        - Shutdown: close storage
        """
        logger.info(f"Starting Study App API in {settings.ENVIRONMENT} mode")

        try:
            await storage.connect()
            if settings.DB_INIT_SCHEMA:
                await init_schema(storage)
        except StorageError as e:
            logger.error(f"Database unavailable at startup: {e}")

        yield

        logger.info("Shutting down Study App API")
        await storage.disconnect()

    app = FastAPI(
        title="Study App API",
        description="CRUD API for study app users.",
        version=API_VERSION,
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Users",
                "description": "Create, list, update and delete users",
            },
            {
                "name": "Legacy",
                "description": "Deprecated aliases for the user endpoints",
            },
            {
                "name": "Health",
                "description": "API health and liveness checks",
            },
        ],
    )

    app.state.settings = settings
    app.state.storage = storage
    app.state.response_options = options

    # =========================================================================
    # Middleware
    # =========================================================================

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log one line per request with status and duration."""
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)"
        )
        return response

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(StudyAppException, study_app_exception_handler)
    app.add_exception_handler(StorageError, storage_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, route_not_found_handler)
    app.add_exception_handler(Exception, unexpected_exception_handler)

    # =========================================================================
    # Routers
    # =========================================================================

    app.include_router(
        users.router,
        prefix="/api/users",
        tags=["Users"]
    )

    app.include_router(
        users.legacy_router,
        tags=["Legacy"]
    )

    app.include_router(
        health.router,
        tags=["Health"]
    )

    # =========================================================================
    # Root Endpoints
    # =========================================================================

    @app.get("/", tags=["Root"])
    async def root():
        """
        Root endpoint - returns API info.
        """
        return {
            "name": "Study App API",
            "version": API_VERSION,
            "status": "running",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "endpoints": {
                "users": "/api/users",
                "legacy_users": "/users/list",
                "health": "/health",
            },
        }

    @app.get("/pagina2", tags=["Legacy"], deprecated=True)
    async def legacy_info():
        """Deprecated application info page, superseded by /."""
        return {
            "application": "Study App",
            "version": API_VERSION,
            "deprecated": True,
            "message": "This route is deprecated. Use / for API information",
        }

    return app


configure_logging(get_settings())

app = create_app()
