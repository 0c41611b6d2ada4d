"""
Account request/response schemas.

The wire format is camelCase (``fullName``, ``createdAt``); documents in
MongoDB stay snake_case.
"""
from datetime import datetime
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from user_api.models.account import Admin, User

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base schema with camelCase aliases on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Requests
# =============================================================================
# Fields are optional strings here: presence and format are checked by the
# rule lists in user_api.core.validation so that every violation is reported.

class UserRegisterRequest(CamelModel):
    """User registration request body."""
    full_name: Optional[str] = Field(None, description="Display name (2-50 characters)")
    username: Optional[str] = Field(None, description="Unique username (3-30 characters)")
    email: Optional[str] = Field(None, description="Email address (must be unique)")
    password: Optional[str] = Field(None, description="Password (min 6 chars, mixed case and a digit)")


class AdminSignupRequest(CamelModel):
    """Admin registration request body."""
    email: Optional[str] = Field(None, description="Email address (must be unique)")
    password: Optional[str] = Field(None, description="Password (min 6 chars, mixed case and a digit)")


class LoginRequest(CamelModel):
    """Login request body (users and admins)."""
    email: Optional[str] = Field(None, description="Account email address")
    password: Optional[str] = Field(None, description="Account password")


# =============================================================================
# Public account views (no password hash)
# =============================================================================

class UserPublic(CamelModel):
    id: str = Field(..., description="User ID")
    full_name: str
    username: str
    email: str
    created_at: datetime

    @classmethod
    def from_account(cls, user: User) -> "UserPublic":
        return cls(
            id=user.id,
            full_name=user.full_name,
            username=user.username,
            email=user.email,
            created_at=user.created_at,
        )


class AdminPublic(CamelModel):
    id: str = Field(..., description="Admin ID")
    email: str
    is_active: bool
    created_at: datetime

    @classmethod
    def from_account(cls, admin: Admin) -> "AdminPublic":
        return cls(
            id=admin.id,
            email=admin.email,
            is_active=admin.is_active,
            created_at=admin.created_at,
        )


class UserSession(CamelModel):
    user: UserPublic
    token: str


class AdminSession(CamelModel):
    admin: AdminPublic
    token: str


# =============================================================================
# Envelopes
# =============================================================================

class ApiResponse(CamelModel, Generic[T]):
    """Success envelope shared by every endpoint."""
    success: bool = True
    message: Optional[str] = None
    data: T


class ListResponse(CamelModel, Generic[T]):
    success: bool = True
    count: int
    data: list[T]


class ErrorDetail(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    """Error envelope, documented in OpenAPI for the error status codes."""
    success: bool = False
    message: str
    errors: Optional[list[ErrorDetail]] = None
