"""
Services module - Account registration, authentication and lookups.
"""
from user_api.services.accounts import (
    ADMIN_ACCOUNTS,
    USER_ACCOUNTS,
    AccountKind,
    AccountReader,
    AuthResult,
)
from user_api.services.authenticator import AccountAuthenticator
from user_api.services.registrar import AccountRegistrar

__all__ = [
    "ADMIN_ACCOUNTS",
    "USER_ACCOUNTS",
    "AccountKind",
    "AccountReader",
    "AuthResult",
    "AccountAuthenticator",
    "AccountRegistrar",
]
