"""
Database connection management for MongoDB and Redis.

Handles are created by the application lifespan, kept on ``app.state`` and
handed to request handlers through dependencies. Nothing here is global.
"""
import logging
from typing import Any, Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from redis.asyncio import Redis

from user_api.config import Settings

logger = logging.getLogger(__name__)


class MongoConnection:
    """Owns a Motor client and the application database for its lifetime."""

    def __init__(self, client: Any, db_name: str):
        self.client = client
        self.db_name = db_name

    @classmethod
    def from_settings(cls, settings: Settings) -> "MongoConnection":
        client = AsyncIOMotorClient(
            settings.mongo_uri,
            serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms,
            tz_aware=True,
        )
        return cls(client, settings.mongo_db_name)

    @property
    def database(self) -> AsyncIOMotorDatabase:
        return self.client[self.db_name]

    async def ping(self) -> None:
        """Round trip to the server; raises if it is unreachable."""
        await self.client.admin.command("ping")

    def close(self) -> None:
        self.client.close()


def connect_mongo(settings: Settings) -> MongoConnection:
    """Open the MongoDB handle used by the application."""
    logger.info("Connecting to MongoDB database %s", settings.mongo_db_name)
    return MongoConnection.from_settings(settings)


def connect_redis(settings: Settings) -> Optional[Redis]:
    """Open the Redis handle used for rate limiting, or None when disabled."""
    if not settings.rate_limit_enabled:
        logger.info("Rate limiting disabled; not connecting to Redis")
        return None
    return Redis(
        host=settings.redis_host,
        port=settings.redis_port,
        decode_responses=True,
    )


async def close_connections(mongo: Optional[MongoConnection], redis: Optional[Redis]) -> None:
    """Close all database connections."""
    if mongo is not None:
        mongo.close()

    if redis is not None:
        await redis.aclose()
