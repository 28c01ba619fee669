"""Chat repository: every query is scoped by the owning account id."""
from typing import List, Optional

from sqlalchemy import select

from api.features.conversation.entities.chat import Chat
from api.features.conversation.update_builder import ChatUpdateBuilder
from api.shared.base import BaseRepository


class ChatRepository(BaseRepository[Chat]):
    """Repository for chat entities."""

    model = Chat

    async def list_for_user(self, user_id: int) -> List[Chat]:
        """All chats of one account, most recently updated first."""
        stmt = (
            select(Chat)
            .where(Chat.user_id == user_id)
            .order_by(Chat.updated_at.desc(), Chat.id.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_for_user(self, chat_id: int, user_id: int) -> Optional[Chat]:
        stmt = select(Chat).where(Chat.id == chat_id, Chat.user_id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update_for_user(
        self, chat_id: int, user_id: int, builder: ChatUpdateBuilder
    ) -> Optional[Chat]:
        """Apply a partial update; returns None when no owned row matched."""
        stmt = builder.build(chat_id=chat_id, user_id=user_id)
        result = await self.session.execute(stmt)
        chat = result.scalar_one_or_none()
        await self.session.flush()
        return chat

    async def delete_for_user(self, chat_id: int, user_id: int) -> bool:
        return await self.delete_where(id=chat_id, user_id=user_id) > 0
