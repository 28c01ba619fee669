"""Service layer for the Auth feature."""
import structlog
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from api.features.auth.entities.account import Account
from api.features.auth.exceptions import (
    DuplicateAccountError,
    InvalidCredentialsError,
    UnknownLoginError,
)
from api.features.auth.repository import AccountRepository
from api.features.auth.security import PasswordHasher
from api.shared.exceptions import StoreError, ValidationError

logger = structlog.get_logger("maternal.auth.service")


class AuthService:
    """Verifies and creates credentials in the credential store."""

    def __init__(self, password_hasher: PasswordHasher):
        self.password_hasher = password_hasher

    async def register(
        self, email: str, password: str, *, db_session: AsyncSession
    ) -> Account:
        """Create an account; the unique constraint on email decides duplicates."""
        if not email or not password:
            raise ValidationError("User already exists or invalid data")
        if not self.password_hasher.fits(password):
            raise ValidationError("Password is too long")

        repository = AccountRepository(db_session)
        password_hash = await self.password_hasher.hash(password)
        try:
            account = await repository.create(
                Account(email=email, password_hash=password_hash)
            )
            await db_session.commit()
        except IntegrityError:
            await db_session.rollback()
            logger.info("Signup rejected, email already registered")
            raise DuplicateAccountError(email)
        except SQLAlchemyError as e:
            await db_session.rollback()
            logger.exception("Failed to create account")
            raise StoreError() from e

        logger.info("Account created", account_id=account.id)
        return account

    async def authenticate(
        self, email: str, password: str, *, db_session: AsyncSession
    ) -> Account:
        """Check a password against the stored hash. No session is issued."""
        if not email or not password:
            raise ValidationError("Email and password are required")

        repository = AccountRepository(db_session)
        try:
            account = await repository.get_by_email(email)
        except SQLAlchemyError as e:
            logger.exception("Failed to load account")
            raise StoreError() from e

        if account is None:
            raise UnknownLoginError()
        if not await self.password_hasher.verify(password, account.password_hash):
            logger.info("Login rejected, password mismatch", account_id=account.id)
            raise InvalidCredentialsError()

        logger.info("Login succeeded", account_id=account.id)
        return account

