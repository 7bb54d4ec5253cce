"""
Health check router for liveness and readiness probes.
"""
from fastapi import APIRouter, status

from userpanel.database.connections import get_user_store

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Basic health check",
)
def health_check():
    """
    Basic health check endpoint.
    Returns 200 if the API is running.
    """
    return {"status": "healthy"}


@router.get(
    "/health/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness check with dependencies",
)
def readiness_check():
    """
    Readiness check that verifies the user document can be loaded.
    """
    checks = {
        "api": "healthy",
        "user_store": "unknown",
    }

    try:
        users = get_user_store().load()
        checks["user_store"] = "healthy"
    except Exception as e:
        users = None
        checks["user_store"] = f"unhealthy: {str(e)}"

    all_healthy = all(v == "healthy" for v in checks.values())

    return {
        "status": "healthy" if all_healthy else "degraded",
        "checks": checks,
        "users": len(users) if users is not None else None,
    }
