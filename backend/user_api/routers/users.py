"""
User router for registration, login and account lookups.
"""
from fastapi import APIRouter, Depends, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from user_api.dependencies.auth import CurrentUser
from user_api.dependencies.database import get_database
from user_api.dependencies.rate_limit import rate_limit
from user_api.schemas.account import (
    ApiResponse,
    ErrorResponse,
    ListResponse,
    LoginRequest,
    UserPublic,
    UserRegisterRequest,
    UserSession,
)
from user_api.services.accounts import USER_ACCOUNTS, AccountReader, AuthResult
from user_api.services.authenticator import AccountAuthenticator
from user_api.services.registrar import AccountRegistrar

router = APIRouter(prefix="/api/users", tags=["Users"])


def get_user_registrar(db: AsyncIOMotorDatabase = Depends(get_database)) -> AccountRegistrar:
    """Dependency to get a registrar for user accounts."""
    return AccountRegistrar(db, USER_ACCOUNTS)


def get_user_authenticator(db: AsyncIOMotorDatabase = Depends(get_database)) -> AccountAuthenticator:
    """Dependency to get an authenticator for user accounts."""
    return AccountAuthenticator(db, USER_ACCOUNTS)


def get_user_reader(db: AsyncIOMotorDatabase = Depends(get_database)) -> AccountReader:
    """Dependency to get read access to user accounts."""
    return AccountReader(db, USER_ACCOUNTS)


def _session(result: AuthResult) -> UserSession:
    return UserSession(user=UserPublic.from_account(result.account), token=result.token)


@router.post(
    "/register",
    response_model=ApiResponse[UserSession],
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    dependencies=[Depends(rate_limit("/api/users/register", "register_rate_limit_attempts"))],
)
async def register(
    body: UserRegisterRequest,
    registrar: AccountRegistrar = Depends(get_user_registrar),
):
    """
    Register a new user account.

    - **fullName**: 2-50 characters
    - **username**: 3-30 letters, digits or underscores (must be unique)
    - **email**: Valid email address (must be unique)
    - **password**: At least 6 characters with upper case, lower case and a digit
    """
    result = await registrar.register(body)
    return ApiResponse[UserSession](message="User registered successfully", data=_session(result))


@router.post(
    "/login",
    response_model=ApiResponse[UserSession],
    summary="Login and get access token",
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
    dependencies=[Depends(rate_limit("/api/users/login", "login_rate_limit_attempts"))],
)
async def login(
    body: LoginRequest,
    authenticator: AccountAuthenticator = Depends(get_user_authenticator),
):
    """
    Authenticate with email and password to receive a JWT token.

    Send the token as `Authorization: Bearer <token>` to protected endpoints.
    """
    result = await authenticator.login(body)
    return ApiResponse[UserSession](message="Login successful", data=_session(result))


@router.get(
    "",
    response_model=ListResponse[UserPublic],
    summary="List users",
)
async def list_users(reader: AccountReader = Depends(get_user_reader)):
    """List all users, newest first. Password hashes are never included."""
    users = [UserPublic.from_account(user) for user in await reader.list_accounts()]
    return ListResponse[UserPublic](count=len(users), data=users)


@router.get(
    "/me",
    response_model=ApiResponse[UserPublic],
    response_model_exclude_none=True,
    summary="Get current user info",
    responses={401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
)
async def get_current_user_info(current_user: CurrentUser):
    """Get the user identified by the bearer token."""
    return ApiResponse[UserPublic](data=UserPublic.from_account(current_user))


@router.get(
    "/{user_id}",
    response_model=ApiResponse[UserPublic],
    response_model_exclude_none=True,
    summary="Get user by ID",
    responses={404: {"model": ErrorResponse}},
)
async def get_user(user_id: str, reader: AccountReader = Depends(get_user_reader)):
    """Fetch a single user by ID."""
    user = await reader.get_account(user_id)
    return ApiResponse[UserPublic](data=UserPublic.from_account(user))
