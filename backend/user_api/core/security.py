"""
Security utilities for password hashing and JWT token management.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from user_api.config import Settings, get_settings

# Password hashing context. bcrypt_sha256 pre-hashes the password so bytes
# past bcrypt's 72-byte input limit still count; plain bcrypt hashes verify
# as a deprecated scheme.
pwd_context = CryptContext(schemes=["bcrypt_sha256", "bcrypt"], deprecated="auto")


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt over its SHA-256 digest.

    Args:
        plain_password: The plain text password to hash

    Returns:
        Hashed password string (salted, never equal to the input)
    """
    return pwd_context.hash(plain_password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if password matches, False otherwise (including when the
        stored hash is empty or not a recognised bcrypt hash)
    """
    if not plain_password or not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Unknown or malformed hash
        return False


def dummy_verify() -> None:
    """Spend the time of one bcrypt verification without a real hash."""
    pwd_context.dummy_verify()


def ensure_signing_key(settings: Optional[Settings] = None) -> str:
    """
    Return the JWT signing secret or fail loudly.

    Called from the application lifespan before any request is served.

    Raises:
        RuntimeError: If JWT_SECRET_KEY is unset or blank
    """
    settings = settings or get_settings()
    secret = settings.jwt_secret_key
    if not secret or not secret.strip():
        raise RuntimeError("JWT_SECRET_KEY is not configured")
    return secret


def create_access_token(
    account_id: str,
    email: str,
    role: str,
    extra_claims: Optional[dict[str, Any]] = None,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a JWT access token.

    Args:
        account_id: Unique account identifier
        email: Normalised account email
        role: Account role ("user" or "admin")
        extra_claims: Additional claims merged into the payload
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT token string
    """
    settings = get_settings()
    secret = ensure_signing_key(settings)

    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.jwt_access_token_expire_minutes)

    now = datetime.now(timezone.utc)
    payload: dict[str, Any] = dict(extra_claims or {})
    payload.update(
        {
            "sub": account_id,
            "id": account_id,
            "email": email,
            "role": role,
            "iat": now,
            "exp": now + expires_delta,
        }
    )

    return jwt.encode(payload, secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict[str, Any]:
    """
    Decode and validate a JWT token.

    Args:
        token: The JWT token string to decode

    Returns:
        Decoded payload dictionary with keys: sub, id, email, role, exp, iat

    Raises:
        JWTError: If token is invalid or expired
    """
    settings = get_settings()
    return jwt.decode(
        token,
        ensure_signing_key(settings),
        algorithms=[settings.jwt_algorithm],
    )


__all__ = [
    "JWTError",
    "hash_password",
    "verify_password",
    "dummy_verify",
    "ensure_signing_key",
    "create_access_token",
    "decode_token",
]
