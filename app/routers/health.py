# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and load balancers.
# =============================================================================

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from app import __version__
from app.config import Settings


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str
    timestamp: str
    environment: str
    version: str


class ChecksResponse(BaseModel):
    """Individual startup checks."""
    configuration: str
    network: str


class ReadinessResponse(BaseModel):
    """Readiness check response."""
    status: str
    checks: ChecksResponse
    timestamp: str


class LivenessResponse(BaseModel):
    """Liveness check response."""
    status: str
    timestamp: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


# =============================================================================
# Endpoints
# =============================================================================

def create_router(settings: Settings) -> APIRouter:
    router = APIRouter()

    @router.get("/health", response_model=HealthResponse)
    async def health_check():
        """
        Health check endpoint.

        Returns basic health status for load balancers and monitoring.
        """
        return HealthResponse(
            status="healthy",
            timestamp=_now(),
            environment=settings.ENVIRONMENT,
            version=__version__,
        )

    @router.get("/health/ready", response_model=ReadinessResponse)
    async def readiness_check():
        """
        Readiness check endpoint.

        The app only starts serving after configuration validated, so
        reaching this handler means configuration is loaded.
        """
        checks = ChecksResponse(
            configuration="loaded",
            network=settings.STELLAR_NETWORK,
        )
        return ReadinessResponse(
            status="ready",
            checks=checks,
            timestamp=_now(),
        )

    @router.get("/health/live", response_model=LivenessResponse)
    async def liveness_check():
        """
        Liveness check endpoint.

        Returns whether the service process is alive.
        Used by Kubernetes/Docker for restart decisions.
        """
        return LivenessResponse(
            status="alive",
            timestamp=_now(),
        )

    return router
