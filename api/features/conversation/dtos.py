"""DTOs for the Conversation feature."""
from datetime import datetime
from typing import Optional

from pydantic import Field

from api.shared.dtos import BaseDTO


class ChatDTO(BaseDTO):
    """Stored chat as returned to clients (owner id is never exposed)."""

    id: int = Field(description="Chat identifier")
    title: Optional[str] = Field(default=None, description="Chat title")
    user_input: str = Field(description="The user's question")
    advice_output: str = Field(description="The advice that was given")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")


class CreateChatRequest(BaseDTO):
    """Request to store a chat."""

    email: Optional[str] = Field(default=None, description="Owner email")
    user_input: Optional[str] = Field(
        default=None, alias="userInput", description="The user's question"
    )
    advice_output: Optional[str] = Field(
        default=None, alias="adviceOutput", description="The advice that was given"
    )
    title: Optional[str] = Field(
        default=None, description="Title; derived from userInput when omitted"
    )


class UpdateChatRequest(BaseDTO):
    """Partial update: only the fields present in the body are applied."""

    email: Optional[str] = Field(default=None, description="Owner email")
    title: Optional[str] = Field(default=None, description="New title")
    user_input: Optional[str] = Field(
        default=None, alias="userInput", description="New question text"
    )
    advice_output: Optional[str] = Field(
        default=None, alias="adviceOutput", description="New advice text"
    )

    def supplied_fields(self) -> dict:
        """Updatable fields explicitly present in the request, nulls included."""
        return {
            name: getattr(self, name)
            for name in ("title", "user_input", "advice_output")
            if name in self.model_fields_set
        }
