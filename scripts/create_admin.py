#!/usr/bin/env python3
"""
Admin Account Seeder

Creates an admin account directly in MongoDB, through the same registrar
(validation, uniqueness, bcrypt) that serves POST /admin/signup.

An existing admin with the same email is a conflict here exactly as it is
over HTTP: the script reports it and exits with status 1.

Usage:
    ADMIN_EMAIL=admin@example.com ADMIN_PASSWORD=Admin123 python scripts/create_admin.py

Environment Variables:
    ADMIN_EMAIL: Email of the admin to create
    ADMIN_PASSWORD: Password (min 6 chars, upper case, lower case and a digit)
    MONGO_URI / MONGO_DB_NAME: Target database (see user_api.config)
    JWT_SECRET_KEY: Needed because registration issues a token
    LOG_LEVEL: Logging level (default: INFO)
"""
import asyncio
import logging
import sys

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from user_api.config import get_settings
from user_api.core.errors import ConflictError, ValidationError
from user_api.database.collections import create_indexes
from user_api.database.connections import connect_mongo
from user_api.schemas.account import AdminSignupRequest
from user_api.services.accounts import ADMIN_ACCOUNTS
from user_api.services.registrar import AccountRegistrar


# ==================== Configuration ====================

class SeedConfig(BaseSettings):
    """Seeder configuration from environment."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    admin_email: str = Field(default="")
    admin_password: str = Field(default="")
    log_level: str = Field(default="INFO")


config = SeedConfig()


# ==================== Logging Setup ====================

logging.basicConfig(
    level=getattr(logging, config.log_level.upper(), logging.INFO),
    format="%(asctime)s | %(levelname)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("create_admin")


async def create_admin(email: str, password: str) -> int:
    """Create the admin; return the process exit code."""
    settings = get_settings()
    connection = connect_mongo(settings)

    try:
        await create_indexes(connection.database)
        registrar = AccountRegistrar(connection.database, ADMIN_ACCOUNTS)
        result = await registrar.register(AdminSignupRequest(email=email, password=password))
    except ValidationError as e:
        for error in e.errors or []:
            logger.error("%s: %s", error["field"], error["message"])
        return 1
    except ConflictError as e:
        logger.error("%s", e.message)
        return 1
    finally:
        connection.close()

    logger.info("Admin created: %s (id %s)", result.account.email, result.account.id)
    return 0


def main() -> int:
    if not config.admin_email or not config.admin_password:
        logger.error("ADMIN_EMAIL and ADMIN_PASSWORD must be set")
        return 2

    logger.info("Creating admin %s in %s", config.admin_email, get_settings().mongo_db_name)
    try:
        return asyncio.run(create_admin(config.admin_email, config.admin_password))
    except Exception as e:
        logger.error("Admin creation failed: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
