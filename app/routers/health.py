# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and load balancers.
# =============================================================================

import logging
from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from app.dependencies import SettingsDep, StoreDep
from lib.catalog_store import StoreError

logger = logging.getLogger(__name__)

router = APIRouter()

VERSION = "1.0.0"


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str
    timestamp: str
    environment: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response."""
    status: str
    database: str
    timestamp: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
async def health_check(settings: SettingsDep):
    """
    Health check endpoint.

    Returns basic health status for load balancers and monitoring.
    """
    return HealthResponse(
        status="healthy",
        timestamp=_now(),
        environment=settings.ENVIRONMENT,
        version=VERSION,
    )


@router.get("/health/ready", response_model=ReadinessResponse)
def readiness_check(store: StoreDep):
    """
    Readiness check endpoint.

    Reports "degraded" when the database can't be queried.
    """
    try:
        store.ping()
        database = "healthy"
    except StoreError as e:
        logger.warning(f"Readiness check failed: {e}")
        database = f"unhealthy: {e.message[:50]}"

    return ReadinessResponse(
        status="ready" if database == "healthy" else "degraded",
        database=database,
        timestamp=_now(),
    )
