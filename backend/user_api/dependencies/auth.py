"""
Authentication dependencies for route protection.
"""
from typing import Annotated, Any, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from motor.motor_asyncio import AsyncIOMotorDatabase

from user_api.core.errors import AuthenticationError, ForbiddenError, NotFoundError
from user_api.core.security import decode_token
from user_api.dependencies.database import get_database
from user_api.models.account import Admin, User, UserRole
from user_api.services.accounts import ADMIN_ACCOUNTS, USER_ACCOUNTS, AccountReader

bearer_scheme = HTTPBearer(auto_error=False)


def get_token_claims(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
) -> dict[str, Any]:
    """
    Decode the bearer token of the request.

    Raises:
        AuthenticationError: If the header is missing, or the token is
            invalid, expired or lacks a subject
    """
    if credentials is None:
        raise AuthenticationError("Not authenticated")

    try:
        claims = decode_token(credentials.credentials)
    except JWTError:
        raise AuthenticationError("Could not validate credentials")

    if not claims.get("sub") or not claims.get("role"):
        raise AuthenticationError("Could not validate credentials")
    return claims


async def get_current_user(
    claims: Annotated[dict[str, Any], Depends(get_token_claims)],
    db: Annotated[AsyncIOMotorDatabase, Depends(get_database)],
) -> User:
    """The user named by a user token."""
    if claims["role"] != UserRole.USER.value:
        raise ForbiddenError()

    try:
        return await AccountReader(db, USER_ACCOUNTS).get_account(claims["sub"])
    except NotFoundError:
        raise AuthenticationError("Could not validate credentials")


async def get_current_admin(
    claims: Annotated[dict[str, Any], Depends(get_token_claims)],
    db: Annotated[AsyncIOMotorDatabase, Depends(get_database)],
) -> Admin:
    """
    The admin named by an admin token.

    Raises:
        ForbiddenError: If the token carries another role or the admin
            has been deactivated
    """
    if claims["role"] != UserRole.ADMIN.value:
        raise ForbiddenError()

    try:
        admin = await AccountReader(db, ADMIN_ACCOUNTS).get_account(claims["sub"])
    except NotFoundError:
        raise AuthenticationError("Could not validate credentials")

    if not admin.can_login():
        raise ForbiddenError("Account is disabled")
    return admin


# Type aliases for cleaner route signatures
CurrentUser = Annotated[User, Depends(get_current_user)]
CurrentAdmin = Annotated[Admin, Depends(get_current_admin)]
