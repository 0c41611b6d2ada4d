"""
Dependencies exposing the handles opened by the application lifespan.
"""
from typing import Optional

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorDatabase
from redis.asyncio import Redis


def get_database(request: Request) -> AsyncIOMotorDatabase:
    """Accounts database of the running application."""
    return request.app.state.mongo.database


def get_redis(request: Request) -> Optional[Redis]:
    """Redis client used for rate limiting, None when disabled."""
    return getattr(request.app.state, "redis", None)
