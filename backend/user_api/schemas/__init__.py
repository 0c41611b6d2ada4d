"""
Request and response schemas for API endpoints.
"""
from user_api.schemas.account import (
    AdminPublic,
    AdminSession,
    AdminSignupRequest,
    ApiResponse,
    ErrorResponse,
    ListResponse,
    LoginRequest,
    UserPublic,
    UserRegisterRequest,
    UserSession,
)

__all__ = [
    # Requests
    "AdminSignupRequest",
    "LoginRequest",
    "UserRegisterRequest",
    # Accounts
    "AdminPublic",
    "UserPublic",
    "AdminSession",
    "UserSession",
    # Envelopes
    "ApiResponse",
    "ErrorResponse",
    "ListResponse",
]
