"""Typed builder for partial chat updates.

Maps whichever optional fields a client supplied onto a single parameterized
``UPDATE chats ... WHERE id = :id AND user_id = :user_id RETURNING ...``.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from sqlalchemy import Update, update

from api.features.conversation.entities.chat import TITLE_MAX_LENGTH, Chat
from api.shared.entities.base import utc_now
from api.shared.exceptions import ValidationError

# field name -> whether NULL is an acceptable value
UPDATABLE_FIELDS: Dict[str, bool] = {
    "title": True,
    "user_input": False,
    "advice_output": False,
}

# request names as clients send them, used in error messages
FIELD_LABELS = {
    "title": "title",
    "user_input": "userInput",
    "advice_output": "adviceOutput",
}


class ChatUpdateBuilder:
    """Collects the supplied fields and renders the UPDATE statement.

    ``updated_at`` is always refreshed. Building with no fields raises
    ``ValidationError``.
    """

    def __init__(self) -> None:
        self._values: Dict[str, Any] = {}

    @classmethod
    def from_fields(cls, fields: Mapping[str, Any]) -> "ChatUpdateBuilder":
        builder = cls()
        for name, value in fields.items():
            builder.set(name, value)
        return builder

    def set(self, name: str, value: Optional[str]) -> "ChatUpdateBuilder":
        if name not in UPDATABLE_FIELDS:
            raise ValidationError(f"Field '{name}' cannot be updated")
        if value is None and not UPDATABLE_FIELDS[name]:
            raise ValidationError(f"{FIELD_LABELS[name]} cannot be null")
        if name == "title" and value is not None and len(value) > TITLE_MAX_LENGTH:
            raise ValidationError(
                f"title must be at most {TITLE_MAX_LENGTH} characters"
            )
        self._values[name] = value
        return self

    @property
    def fields(self) -> Dict[str, Any]:
        return dict(self._values)

    def build(self, *, chat_id: int, user_id: int) -> Update:
        if not self._values:
            raise ValidationError("No fields to update")
        return (
            update(Chat)
            .where(Chat.id == chat_id, Chat.user_id == user_id)
            .values(**self._values, updated_at=utc_now())
            .returning(Chat)
        )
