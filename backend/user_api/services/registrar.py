"""
Account registration: validate, check uniqueness, hash, persist, issue a token.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import BaseModel
from pymongo.errors import DuplicateKeyError
from starlette.concurrency import run_in_threadpool

from user_api.core.errors import ConflictError
from user_api.core.security import hash_password
from user_api.core.validation import run_rules
from user_api.services.accounts import AccountKind, AuthResult, issue_token, normalize_fields

logger = logging.getLogger(__name__)


class AccountRegistrar:
    """Creates accounts of one kind and issues their first token."""

    def __init__(self, db: AsyncIOMotorDatabase, kind: AccountKind):
        self.kind = kind
        self.collection = db[kind.collection]

    async def register(self, request: BaseModel) -> AuthResult:
        """
        Register a new account.

        Args:
            request: Registration body (UserRegisterRequest or AdminSignupRequest)

        Returns:
            AuthResult with the stored account and a signed token

        Raises:
            ValidationError: If any registration rule fails
            ConflictError: If an account with the same unique key exists
        """
        run_rules(self.kind.registration_rules, request.model_dump(by_alias=True))

        fields = normalize_fields(request.model_dump(exclude={"password"}))

        # Fast path; the unique indexes remain authoritative under races
        lookup = {"$or": [{name: fields[name]} for name in self.kind.unique_fields]}
        if await self.collection.find_one(lookup, {"_id": 1}) is not None:
            logger.info("%s registration rejected: account exists", self.kind.label)
            raise ConflictError(self.kind.conflict_message)

        hashed = await run_in_threadpool(hash_password, request.password)
        account = self.kind.model(**fields, hashed_password=hashed)

        try:
            result = await self.collection.insert_one(account.to_document())
        except DuplicateKeyError:
            logger.info("%s registration rejected: duplicate key on insert", self.kind.label)
            raise ConflictError(self.kind.conflict_message)

        account = account.model_copy(update={"id": str(result.inserted_id)})
        logger.info("%s registered: %s", self.kind.label, account.id)

        return AuthResult(account=account, token=issue_token(account, self.kind.role))
