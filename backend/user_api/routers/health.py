"""
Health check router for liveness and readiness probes.
"""
from datetime import datetime, timezone

from fastapi import APIRouter, Request, status

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Basic health check",
)
async def health_check():
    """
    Basic health check endpoint.
    Returns 200 if the API is running.
    """
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get(
    "/health/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness check with dependencies",
)
async def readiness_check(request: Request):
    """
    Readiness check that verifies database connections.
    Reports MongoDB and Redis status; Redis is "disabled" when rate
    limiting is turned off.
    """
    checks = {
        "api": "healthy",
        "mongodb": "unknown",
        "redis": "unknown",
    }

    # Check MongoDB
    try:
        await request.app.state.mongo.ping()
        checks["mongodb"] = "healthy"
    except Exception as e:
        checks["mongodb"] = f"unhealthy: {str(e)}"

    # Check Redis
    redis = getattr(request.app.state, "redis", None)
    if redis is None:
        checks["redis"] = "disabled"
    else:
        try:
            await redis.ping()
            checks["redis"] = "healthy"
        except Exception as e:
            checks["redis"] = f"unhealthy: {str(e)}"

    # Overall status
    all_healthy = all(v in ("healthy", "disabled") for v in checks.values())

    return {
        "status": "healthy" if all_healthy else "degraded",
        "checks": checks,
    }
