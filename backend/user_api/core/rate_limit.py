"""
Rate limiting utilities.

Fixed-window counters in Redis keyed by endpoint and client IP, created with
their expiry in one transaction. The limiter fails open: if Redis is disabled
or unreachable the request is allowed and a warning is logged.
"""
import logging
from typing import Optional

from redis.asyncio import Redis
from redis.exceptions import RedisError

logger = logging.getLogger(__name__)


def rate_limit_key(endpoint: str, ip: str) -> str:
    return f"ratelimit:{endpoint}:{ip}"


async def check_rate_limit(
    redis: Optional[Redis],
    ip: str,
    endpoint: str,
    limit: int,
    window_seconds: int,
) -> bool:
    """
    Count a request and report whether it is within the limit.

    Args:
        redis: Redis client, or None when rate limiting is disabled
        ip: Client IP address
        endpoint: Endpoint identifier (e.g., "/api/users/login")
        limit: Max requests allowed per window
        window_seconds: Window length in seconds

    Returns:
        True if request is allowed, False if rate limited
    """
    if redis is None:
        return True

    key = rate_limit_key(endpoint, ip)
    try:
        # MULTI/EXEC: the counter never exists without its expiry
        async with redis.pipeline(transaction=True) as pipe:
            pipe.set(key, 0, ex=window_seconds, nx=True)
            pipe.incr(key)
            _, current = await pipe.execute()
    except RedisError as e:
        logger.warning("Rate limiter unavailable, allowing request: %s", e)
        return True

    if current > limit:
        logger.info("Rate limit exceeded for %s on %s (%d/%d)", ip, endpoint, current, limit)
        return False
    return True
