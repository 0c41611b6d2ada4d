"""
Application error taxonomy.

Services raise these; the exception handlers registered in ``user_api.main``
turn them into the ``{success: false, message, errors?}`` envelope with the
matching status code.
"""
from typing import Any, Optional

from fastapi import status


class AppError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(
        self,
        message: Optional[str] = None,
        errors: Optional[list[dict[str, Any]]] = None,
    ):
        self.message = message or self.default_message
        self.errors = errors
        super().__init__(self.message)

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"success": False, "message": self.message}
        if self.errors:
            payload["errors"] = self.errors
        return payload


class ValidationError(AppError):
    """Malformed input. Carries every violated rule, not just the first."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Validation failed"


class AuthenticationError(AppError):
    """Bad credentials. The message never says which factor failed."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid credentials"


class ForbiddenError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Insufficient permissions"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class ConflictError(AppError):
    """A unique constraint of the credential store would be violated."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Resource already exists"


class RateLimitError(AppError):
    status_code = status.HTTP_429_TOO_MANY_REQUESTS
    default_message = "Too many requests. Please try again later."


class InternalError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"
