"""
Collection names and index definitions for the accounts database.
"""
from motor.motor_asyncio import AsyncIOMotorDatabase


class Collections:
    """Collection names in the accounts database."""
    USERS = "users"
    ADMINS = "admins"


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """
    Create the unique indexes that back account uniqueness.

    These indexes are what make concurrent duplicate registrations fail
    with a duplicate key error instead of storing two accounts.
    """
    users = db[Collections.USERS]
    await users.create_index("email", unique=True)
    await users.create_index("username", unique=True)
    await users.create_index([("created_at", -1)])

    admins = db[Collections.ADMINS]
    await admins.create_index("email", unique=True)
