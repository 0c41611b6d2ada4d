"""
Per-endpoint rate limiting dependency.
"""
from typing import Callable, Optional

from fastapi import Depends, Request
from redis.asyncio import Redis

from user_api.config import Settings, get_settings
from user_api.core.errors import RateLimitError
from user_api.core.rate_limit import check_rate_limit
from user_api.dependencies.database import get_redis


def get_client_ip(request: Request) -> str:
    """Extract client IP from request."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


def rate_limit(endpoint: str, limit_setting: str) -> Callable:
    """
    Dependency factory limiting requests per client IP.

    Usage:
        @router.post("/login", dependencies=[Depends(rate_limit("/api/users/login", "login_rate_limit_attempts"))])

    Args:
        endpoint: Key component identifying the endpoint
        limit_setting: Name of the Settings attribute holding the limit

    Raises:
        RateLimitError: When the client exceeded the limit for the window
    """
    async def limiter(
        request: Request,
        redis: Optional[Redis] = Depends(get_redis),
        settings: Settings = Depends(get_settings),
    ) -> None:
        allowed = await check_rate_limit(
            redis,
            get_client_ip(request),
            endpoint,
            limit=getattr(settings, limit_setting),
            window_seconds=settings.rate_limit_window_seconds,
        )
        if not allowed:
            raise RateLimitError()

    return limiter
