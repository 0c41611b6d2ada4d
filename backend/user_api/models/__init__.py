"""
Pydantic models for database documents.
"""
from user_api.models.account import Account, Admin, User, UserRole

__all__ = [
    "Account",
    "Admin",
    "User",
    "UserRole",
]
