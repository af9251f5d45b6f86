"""Account registration and login."""

import hashlib
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from devconnect.auth.jwt import create_access_token
from devconnect.auth.password import hash_password, verify_password
from devconnect.errors import DuplicateAccount, InvalidCredentials, Unauthorized
from devconnect.logging import get_logger
from devconnect.models.user import User

logger = get_logger(__name__)

GRAVATAR_URL = "https://www.gravatar.com/avatar/{digest}?s=200&r=pg&d=mm"


def gravatar_url(email: str) -> str:
    """Build the avatar URL gravatar serves for an email address."""
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    return GRAVATAR_URL.format(digest=digest)


class AuthService:
    """Service for account registration and credential checks."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _find_by_email(self, email: str) -> User | None:
        result = await self.db.execute(select(User).where(User.email == email.lower()))
        return result.scalar_one_or_none()

    async def register(self, name: str, email: str, password: str) -> str:
        """
        Create an account and return a signed token for it.

        Raises:
            DuplicateAccount: an account already uses this email
        """
        if await self._find_by_email(email):
            raise DuplicateAccount()

        user = User(
            name=name,
            email=email.lower(),
            password_hash=hash_password(password),
            avatar=gravatar_url(email),
        )
        self.db.add(user)

        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise DuplicateAccount()

        logger.info("account_registered", user_id=str(user.id))
        return create_access_token(str(user.id), user.name)

    async def authenticate(self, email: str, password: str) -> str:
        """
        Check credentials and return a signed token.

        Raises:
            InvalidCredentials: unknown email or wrong password
        """
        user = await self._find_by_email(email)
        if not user or not verify_password(password, user.password_hash):
            logger.info("login_failed", email=email.lower())
            raise InvalidCredentials()

        return create_access_token(str(user.id), user.name)

    async def get_account(self, user_id: UUID) -> User:
        """
        Load the account behind a verified token.

        Raises:
            Unauthorized: the account has been deleted since the token was issued
        """
        user = await self.db.get(User, user_id)
        if not user:
            raise Unauthorized("User not found")
        return user
