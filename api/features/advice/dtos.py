"""DTOs for the Advice feature."""
from typing import Optional

from pydantic import Field

from api.shared.dtos import BaseDTO


class GenerateAdviceRequest(BaseDTO):
    """Question to forward to the provider."""

    user_input: Optional[str] = Field(
        default=None, alias="userInput", description="The user's question"
    )
