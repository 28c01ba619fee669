"""Account repository using base repository pattern."""
from typing import Optional

from sqlalchemy import select

from api.features.auth.entities.account import Account
from api.shared.base import BaseRepository


class AccountRepository(BaseRepository[Account]):
    """Repository for account entities."""

    model = Account

    async def get_by_email(self, email: str) -> Optional[Account]:
        return await self.get_one_by_field("email", email)

    async def get_id_by_email(self, email: str) -> Optional[int]:
        """Resolve an email to its account id without loading the hash."""
        stmt = select(Account.id).where(Account.email == email)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
