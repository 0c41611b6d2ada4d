"""
Dependencies for dependency injection in routes.
"""
from user_api.dependencies.auth import (
    CurrentAdmin,
    CurrentUser,
    get_current_admin,
    get_current_user,
    get_token_claims,
)
from user_api.dependencies.database import get_database, get_redis
from user_api.dependencies.rate_limit import get_client_ip, rate_limit

__all__ = [
    "CurrentAdmin",
    "CurrentUser",
    "get_current_admin",
    "get_current_user",
    "get_token_claims",
    "get_database",
    "get_redis",
    "get_client_ip",
    "rate_limit",
]
