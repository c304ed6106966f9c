"""
Health check endpoints.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from shared.config.settings import settings
from shared.infrastructure.db import get_db_context, ping


router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("")
def health_check():
    """Basic health check endpoint."""
    return {
        "status": "healthy",
        "service": "portfolio-api",
        "environment": settings.environment,
    }


@router.get("/detailed")
def detailed_health_check():
    """
    Health check that verifies database connectivity.
    Returns 503 when the database does not answer.
    """
    with get_db_context() as db:
        database_ok = ping(db)

    checks = {
        "service": "portfolio-api",
        "environment": settings.environment,
        "status": "healthy" if database_ok else "degraded",
        "dependencies": {
            "database": {"status": "healthy" if database_ok else "unhealthy"},
        },
    }
    if not database_ok:
        return JSONResponse(content=checks, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)
    return checks
