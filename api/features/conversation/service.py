"""Conversation service: CRUD over stored chats, scoped per account.

Each public method resolves the email to an account id and passes that id to
every repository call; there is no other access control.
"""
from __future__ import annotations

from typing import Any, List, Mapping, Optional

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from api.features.auth.exceptions import AccountNotFoundError
from api.features.auth.repository import AccountRepository
from api.features.conversation.entities.chat import TITLE_MAX_LENGTH, Chat
from api.features.conversation.exceptions import ChatNotFoundError
from api.features.conversation.repository import ChatRepository
from api.features.conversation.update_builder import ChatUpdateBuilder
from api.shared.exceptions import StoreError, ValidationError

logger = structlog.get_logger("maternal.conversation.service")

TITLE_PREFIX_LENGTH = 50
TITLE_TRUNCATION_MARKER = "..."


def derive_title(user_input: str) -> str:
    """First 50 characters of the question, marked when truncated."""
    if len(user_input) > TITLE_PREFIX_LENGTH:
        return user_input[:TITLE_PREFIX_LENGTH] + TITLE_TRUNCATION_MARKER
    return user_input


def _require_email(email: Optional[str]) -> str:
    if not email:
        raise ValidationError("Email is required")
    return email


class ConversationService:
    """Service for chat history operations."""

    async def _resolve_account_id(self, email: str, db_session: AsyncSession) -> int:
        account_id = await AccountRepository(db_session).get_id_by_email(email)
        if account_id is None:
            raise AccountNotFoundError(email)
        return account_id

    async def list_chats(
        self, email: Optional[str], *, db_session: AsyncSession
    ) -> List[Chat]:
        email = _require_email(email)
        try:
            user_id = await self._resolve_account_id(email, db_session)
            return await ChatRepository(db_session).list_for_user(user_id)
        except SQLAlchemyError as e:
            logger.exception("Failed to list chats")
            raise StoreError() from e

    async def get_chat(
        self, email: Optional[str], chat_id: int, *, db_session: AsyncSession
    ) -> Chat:
        email = _require_email(email)
        try:
            user_id = await self._resolve_account_id(email, db_session)
            chat = await ChatRepository(db_session).get_for_user(chat_id, user_id)
        except SQLAlchemyError as e:
            logger.exception("Failed to fetch chat", chat_id=chat_id)
            raise StoreError() from e
        if chat is None:
            raise ChatNotFoundError(chat_id)
        return chat

    async def create_chat(
        self,
        email: Optional[str],
        user_input: Optional[str],
        advice_output: Optional[str],
        title: Optional[str] = None,
        *,
        db_session: AsyncSession,
    ) -> Chat:
        if not email or not user_input or not advice_output:
            raise ValidationError("Email, userInput, and adviceOutput are required")
        chat_title = title or derive_title(user_input)
        if len(chat_title) > TITLE_MAX_LENGTH:
            raise ValidationError(
                f"title must be at most {TITLE_MAX_LENGTH} characters"
            )

        try:
            user_id = await self._resolve_account_id(email, db_session)
            chat = await ChatRepository(db_session).create(
                Chat(
                    user_id=user_id,
                    title=chat_title,
                    user_input=user_input,
                    advice_output=advice_output,
                )
            )
            await db_session.commit()
        except SQLAlchemyError as e:
            await db_session.rollback()
            logger.exception("Failed to create chat")
            raise StoreError() from e

        logger.info("Chat created", chat_id=chat.id, user_id=user_id)
        return chat

    async def update_chat(
        self,
        email: Optional[str],
        chat_id: int,
        fields: Mapping[str, Any],
        *,
        db_session: AsyncSession,
    ) -> Chat:
        """Apply only the supplied fields; updated_at is always refreshed."""
        email = _require_email(email)
        try:
            user_id = await self._resolve_account_id(email, db_session)
            builder = ChatUpdateBuilder.from_fields(fields)
            chat = await ChatRepository(db_session).update_for_user(
                chat_id, user_id, builder
            )
            if chat is None:
                await db_session.rollback()
                raise ChatNotFoundError(chat_id)
            await db_session.commit()
        except SQLAlchemyError as e:
            await db_session.rollback()
            logger.exception("Failed to update chat", chat_id=chat_id)
            raise StoreError() from e

        logger.info("Chat updated", chat_id=chat_id, fields=sorted(builder.fields))
        return chat

    async def delete_chat(
        self, email: Optional[str], chat_id: int, *, db_session: AsyncSession
    ) -> None:
        email = _require_email(email)
        try:
            user_id = await self._resolve_account_id(email, db_session)
            deleted = await ChatRepository(db_session).delete_for_user(chat_id, user_id)
            if not deleted:
                raise ChatNotFoundError(chat_id)
            await db_session.commit()
        except SQLAlchemyError as e:
            await db_session.rollback()
            logger.exception("Failed to delete chat", chat_id=chat_id)
            raise StoreError() from e

        logger.info("Chat deleted", chat_id=chat_id, user_id=user_id)
