"""
Core module - Security, validation, errors and rate limiting.
"""
from user_api.core.errors import (
    AppError,
    AuthenticationError,
    ConflictError,
    ForbiddenError,
    InternalError,
    NotFoundError,
    RateLimitError,
    ValidationError,
)
from user_api.core.rate_limit import check_rate_limit
from user_api.core.security import (
    create_access_token,
    decode_token,
    ensure_signing_key,
    hash_password,
    verify_password,
)

__all__ = [
    "AppError",
    "AuthenticationError",
    "ConflictError",
    "ForbiddenError",
    "InternalError",
    "NotFoundError",
    "RateLimitError",
    "ValidationError",
    "check_rate_limit",
    "create_access_token",
    "decode_token",
    "ensure_signing_key",
    "hash_password",
    "verify_password",
]
