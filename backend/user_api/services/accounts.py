"""
Account kinds and read access to the credential store.

An ``AccountKind`` describes one account variant (user or admin): where it
is stored, which fields must be unique, how it is validated at registration
and which role its tokens carry. The registrar and authenticator are written
once against this description.
"""
from dataclasses import dataclass
from typing import Any, NamedTuple

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from user_api.core.errors import NotFoundError
from user_api.core.security import create_access_token
from user_api.core.validation import (
    ADMIN_REGISTRATION_RULES,
    USER_REGISTRATION_RULES,
    Rule,
    normalize_email,
)
from user_api.database.collections import Collections
from user_api.models.account import Account, Admin, User, UserRole


@dataclass(frozen=True)
class AccountKind:
    label: str
    role: UserRole
    collection: str
    model: type[Account]
    unique_fields: tuple[str, ...]
    registration_rules: list[Rule]
    conflict_message: str


USER_ACCOUNTS = AccountKind(
    label="User",
    role=UserRole.USER,
    collection=Collections.USERS,
    model=User,
    unique_fields=("email", "username"),
    registration_rules=USER_REGISTRATION_RULES,
    conflict_message="User already exists with this email or username",
)

ADMIN_ACCOUNTS = AccountKind(
    label="Admin",
    role=UserRole.ADMIN,
    collection=Collections.ADMINS,
    model=Admin,
    unique_fields=("email",),
    registration_rules=ADMIN_REGISTRATION_RULES,
    conflict_message="Admin already exists with this email",
)


class AuthResult(NamedTuple):
    """Outcome of a successful registration or login."""
    account: Account
    token: str


def normalize_fields(fields: dict[str, Any]) -> dict[str, Any]:
    """Trim string fields and lower-case the email."""
    normalized = {
        key: value.strip() if isinstance(value, str) else value
        for key, value in fields.items()
    }
    if "email" in normalized:
        normalized["email"] = normalize_email(normalized["email"])
    return normalized


def issue_token(account: Account, role: UserRole) -> str:
    """Sign a session token for a stored account."""
    return create_access_token(
        account_id=account.id,
        email=account.email,
        role=role.value,
        extra_claims=account.token_claims(),
    )


class AccountReader:
    """Sanitised lookups of stored accounts."""

    def __init__(self, db: AsyncIOMotorDatabase, kind: AccountKind):
        self.kind = kind
        self.collection = db[kind.collection]

    async def list_accounts(self) -> list[Account]:
        """All accounts of this kind, newest first."""
        cursor = self.collection.find().sort("created_at", -1)
        documents = await cursor.to_list(length=None)
        return [self.kind.model.from_document(doc) for doc in documents]

    async def get_account(self, account_id: str) -> Account:
        """
        Fetch one account by id.

        Raises:
            NotFoundError: If the id is malformed or no account has it
        """
        if not ObjectId.is_valid(account_id):
            raise NotFoundError(f"{self.kind.label} not found")

        document = await self.collection.find_one({"_id": ObjectId(account_id)})
        if document is None:
            raise NotFoundError(f"{self.kind.label} not found")

        return self.kind.model.from_document(document)
