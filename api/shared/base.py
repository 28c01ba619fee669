"""Base repository with the CRUD statements shared by feature repositories."""
from abc import ABC
from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from api.shared.entities.base import BaseEntity

T = TypeVar("T", bound=BaseEntity)


class BaseRepository(ABC, Generic[T]):
    """Generic repository bound to one entity type and one session.

    Repositories only flush; committing is the service's decision.
    """

    model: Type[T]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, entity: T) -> T:
        """Create new entity."""
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def get_one_by_field(self, field_name: str, value: Any) -> Optional[T]:
        """Get the first entity whose field equals value."""
        field = getattr(self.model, field_name)
        stmt = select(self.model).where(field == value).limit(1)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete_where(self, **filters: Any) -> int:
        """Delete entities matching equality filters, returning the row count."""
        stmt = delete(self.model)
        for field_name, value in filters.items():
            stmt = stmt.where(getattr(self.model, field_name) == value)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
