"""
Admin router for admin signup and login.
"""
from fastapi import APIRouter, Depends, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from user_api.dependencies.auth import CurrentAdmin
from user_api.dependencies.database import get_database
from user_api.dependencies.rate_limit import rate_limit
from user_api.schemas.account import (
    AdminPublic,
    AdminSession,
    AdminSignupRequest,
    ApiResponse,
    ErrorResponse,
    LoginRequest,
)
from user_api.services.accounts import ADMIN_ACCOUNTS, AuthResult
from user_api.services.authenticator import AccountAuthenticator
from user_api.services.registrar import AccountRegistrar

router = APIRouter(prefix="/admin", tags=["Admin"])


def get_admin_registrar(db: AsyncIOMotorDatabase = Depends(get_database)) -> AccountRegistrar:
    return AccountRegistrar(db, ADMIN_ACCOUNTS)


def get_admin_authenticator(db: AsyncIOMotorDatabase = Depends(get_database)) -> AccountAuthenticator:
    return AccountAuthenticator(db, ADMIN_ACCOUNTS)


def _session(result: AuthResult) -> AdminSession:
    return AdminSession(admin=AdminPublic.from_account(result.account), token=result.token)


@router.post(
    "/signup",
    response_model=ApiResponse[AdminSession],
    status_code=status.HTTP_201_CREATED,
    summary="Register a new admin",
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    dependencies=[Depends(rate_limit("/admin/signup", "register_rate_limit_attempts"))],
)
async def signup(
    body: AdminSignupRequest,
    registrar: AccountRegistrar = Depends(get_admin_registrar),
):
    """Register an admin account. The issued token carries the `admin` role."""
    result = await registrar.register(body)
    return ApiResponse[AdminSession](message="Admin registered successfully", data=_session(result))


@router.post(
    "/login",
    response_model=ApiResponse[AdminSession],
    summary="Admin login",
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
    dependencies=[Depends(rate_limit("/admin/login", "login_rate_limit_attempts"))],
)
async def login(
    body: LoginRequest,
    authenticator: AccountAuthenticator = Depends(get_admin_authenticator),
):
    """Authenticate an admin with email and password."""
    result = await authenticator.login(body)
    return ApiResponse[AdminSession](message="Admin login successful", data=_session(result))


@router.get(
    "/me",
    response_model=ApiResponse[AdminPublic],
    response_model_exclude_none=True,
    summary="Get current admin info",
    responses={401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
)
async def get_current_admin_info(current_admin: CurrentAdmin):
    """Get the admin identified by the bearer token. Requires an admin token."""
    return ApiResponse[AdminPublic](data=AdminPublic.from_account(current_admin))
