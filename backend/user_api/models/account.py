"""
Account document models for the MongoDB ``users`` and ``admins`` collections.
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserRole(str, Enum):
    """Role claim carried in issued tokens."""
    USER = "user"
    ADMIN = "admin"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Account(BaseModel):
    """
    Fields shared by every stored account.

    ``hashed_password`` lives only on the document model; the public
    schemas in ``user_api.schemas`` never expose it.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    email: EmailStr = Field(..., description="Unique, lower-cased email address")
    hashed_password: str = Field(..., min_length=1, description="Bcrypt hashed password")
    created_at: datetime = Field(default_factory=utc_now, description="Account creation timestamp")

    @classmethod
    def from_document(cls, document: dict[str, Any]):
        """Build a model from a raw Mongo document (ObjectId -> str)."""
        data = dict(document)
        if "_id" in data:
            data["_id"] = str(data["_id"])
        return cls.model_validate(data)

    def to_document(self) -> dict[str, Any]:
        """Document to insert; ``_id`` is left for the store to assign."""
        return self.model_dump(exclude={"id"})

    def token_claims(self) -> dict[str, Any]:
        """Extra claims embedded in this account's tokens."""
        return {}

    def can_login(self) -> bool:
        return True


class User(Account):
    """Regular user account."""
    full_name: str = Field(..., description="Display name")
    username: str = Field(..., description="Unique username")

    def token_claims(self) -> dict[str, Any]:
        return {"username": self.username, "fullName": self.full_name}


class Admin(Account):
    """Administrator account."""
    is_active: bool = Field(default=True, description="Inactive admins cannot log in")

    def can_login(self) -> bool:
        return self.is_active
