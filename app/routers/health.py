# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and load balancers.
# =============================================================================

import logging
import time
from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.dependencies import ResponseOptionsDep, SettingsDep, StorageDep
from lib.database import StorageError

logger = logging.getLogger(__name__)

router = APIRouter()

API_VERSION = "1.0.0"

# Process start, for uptime reporting
_STARTED_AT = time.monotonic()


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Health check response when storage is reachable."""
    status: str
    timestamp: str
    uptime_seconds: float
    database: str
    environment: str
    version: str


class UnhealthyResponse(BaseModel):
    """Health check response when the storage ping fails."""
    status: str
    timestamp: str
    database: str
    error: str | None = None


class LivenessResponse(BaseModel):
    """Liveness check response."""
    status: str
    timestamp: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


# =============================================================================
# Endpoints
# =============================================================================

@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"model": UnhealthyResponse}},
)
async def health_check(
    storage: StorageDep,
    settings: SettingsDep,
    options: ResponseOptionsDep,
):
    """
    Health check endpoint.

    Pings the database. Returns 200 with database "connected" when it
    answers, 503 with database "disconnected" otherwise.
    """
    try:
        await storage.ping()
    except StorageError as e:
        logger.warning(f"Health check failed: {e}")
        body = UnhealthyResponse(
            status="unhealthy",
            timestamp=_now(),
            database="disconnected",
            error=e.message if options.expose_error_details else None,
        )
        return JSONResponse(
            status_code=503,
            content=body.model_dump(exclude_none=True),
        )

    return HealthResponse(
        status="healthy",
        timestamp=_now(),
        uptime_seconds=round(time.monotonic() - _STARTED_AT, 3),
        database="connected",
        environment=settings.ENVIRONMENT,
        version=API_VERSION,
    )


@router.get("/health/live", response_model=LivenessResponse)
async def liveness_check():
    """
    Liveness check endpoint.

    Returns whether the service process is alive without touching storage.
    """
    return LivenessResponse(
        status="alive",
        timestamp=_now(),
    )
