"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up (liveness)

Design Decisions:
    - No readiness probe: the service holds no connections, liveness == readiness
"""

from fastapi import APIRouter, status

from payments.config import get_settings

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": "payment-instructions-api",
        "version": settings.app_version,
    }
