"""
Database module - MongoDB and Redis connections and collection definitions.
"""
from user_api.database.collections import Collections, create_indexes
from user_api.database.connections import (
    MongoConnection,
    close_connections,
    connect_mongo,
    connect_redis,
)

__all__ = [
    "Collections",
    "create_indexes",
    "MongoConnection",
    "close_connections",
    "connect_mongo",
    "connect_redis",
]
