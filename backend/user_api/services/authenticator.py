"""
Account login: look up by email, verify the password, issue a token.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from starlette.concurrency import run_in_threadpool

from user_api.core.errors import AuthenticationError
from user_api.core.security import dummy_verify, verify_password
from user_api.core.validation import LOGIN_RULES, normalize_email, run_rules
from user_api.schemas.account import LoginRequest
from user_api.services.accounts import AccountKind, AuthResult, issue_token

logger = logging.getLogger(__name__)


class AccountAuthenticator:
    """Checks credentials for one account kind."""

    def __init__(self, db: AsyncIOMotorDatabase, kind: AccountKind):
        self.kind = kind
        self.collection = db[kind.collection]

    async def login(self, request: LoginRequest) -> AuthResult:
        """
        Authenticate with email and password.

        Unknown email, wrong password and an inactive account all raise the
        same AuthenticationError, so the response does not reveal whether
        the account exists.

        Raises:
            ValidationError: If email or password is missing or malformed
            AuthenticationError: If the credentials do not match
        """
        run_rules(LOGIN_RULES, request.model_dump(by_alias=True))
        email = normalize_email(request.email)

        document = await self.collection.find_one({"email": email})
        if document is None:
            await run_in_threadpool(dummy_verify)
            logger.info("%s login failed: unknown email", self.kind.label)
            raise AuthenticationError()

        account = self.kind.model.from_document(document)
        valid = await run_in_threadpool(verify_password, request.password, account.hashed_password)

        if not valid or not account.can_login():
            logger.info("%s login failed for %s", self.kind.label, account.id)
            raise AuthenticationError()

        return AuthResult(account=account, token=issue_token(account, self.kind.role))
