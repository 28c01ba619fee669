"""Account entity backing the credential store."""
from typing import TYPE_CHECKING, List

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from api.shared.entities.base import BaseEntity

if TYPE_CHECKING:
    from api.features.conversation.entities.chat import Chat


class Account(BaseEntity):
    """Registered user identified by a unique email."""

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    # bcrypt hash; the column keeps its historical name
    password_hash: Mapped[str] = mapped_column("password", String(255), nullable=False)

    chats: Mapped[List["Chat"]] = relationship(
        back_populates="owner",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Account(id={self.id}, email={self.email!r})>"
