"""Controller for the Conversation feature."""
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from api.features.conversation.dtos import (
    ChatDTO,
    CreateChatRequest,
    UpdateChatRequest,
)
from api.features.conversation.service import ConversationService
from api.shared.dtos import MessageResponse


class ConversationController:
    """Controller handling chat CRUD for one account at a time."""

    def __init__(self, conversation_service: ConversationService):
        self.conversation_service = conversation_service

    async def list_chats(
        self, *, email: Optional[str], db_session: AsyncSession
    ) -> List[ChatDTO]:
        chats = await self.conversation_service.list_chats(email, db_session=db_session)
        return [ChatDTO.model_validate(chat) for chat in chats]

    async def get_chat(
        self, *, chat_id: int, email: Optional[str], db_session: AsyncSession
    ) -> ChatDTO:
        chat = await self.conversation_service.get_chat(
            email, chat_id, db_session=db_session
        )
        return ChatDTO.model_validate(chat)

    async def create_chat(
        self, *, request: CreateChatRequest, db_session: AsyncSession
    ) -> ChatDTO:
        chat = await self.conversation_service.create_chat(
            request.email,
            request.user_input,
            request.advice_output,
            request.title,
            db_session=db_session,
        )
        return ChatDTO.model_validate(chat)

    async def update_chat(
        self, *, chat_id: int, request: UpdateChatRequest, db_session: AsyncSession
    ) -> ChatDTO:
        chat = await self.conversation_service.update_chat(
            request.email,
            chat_id,
            request.supplied_fields(),
            db_session=db_session,
        )
        return ChatDTO.model_validate(chat)

    async def delete_chat(
        self, *, chat_id: int, email: Optional[str], db_session: AsyncSession
    ) -> MessageResponse:
        await self.conversation_service.delete_chat(
            email, chat_id, db_session=db_session
        )
        return MessageResponse(message="Chat deleted successfully")
