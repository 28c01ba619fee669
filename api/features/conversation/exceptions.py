"""Exceptions for the Conversation feature."""
from api.shared.exceptions import NotFoundError


class ChatNotFoundError(NotFoundError):
    """Raised when a chat does not exist or belongs to another account."""

    def __init__(self, chat_id: int):
        super().__init__("Chat not found", {"chat_id": chat_id})
