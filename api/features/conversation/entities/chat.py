"""Chat entity backing the conversation store."""
from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from api.shared.entities.base import BaseEntity, TimestampMixin

if TYPE_CHECKING:
    from api.features.auth.entities.account import Account

TITLE_MAX_LENGTH = 255


class Chat(TimestampMixin, BaseEntity):
    """One question/answer exchange owned by exactly one account."""

    __tablename__ = "chats"

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[Optional[str]] = mapped_column(String(TITLE_MAX_LENGTH))
    user_input: Mapped[str] = mapped_column(Text, nullable=False)
    advice_output: Mapped[str] = mapped_column(Text, nullable=False)

    owner: Mapped["Account"] = relationship(back_populates="chats")
