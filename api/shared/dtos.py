"""Shared DTOs for the Maternal Health API."""
from datetime import datetime

from pydantic import BaseModel, Field


class BaseDTO(BaseModel):
    """Base DTO with common configuration."""

    class Config:
        from_attributes = True
        populate_by_name = True
        json_encoders = {
            datetime: lambda v: v.isoformat(),
        }


class MessageResponse(BaseDTO):
    """Plain confirmation message."""
    message: str = Field(description="Human readable outcome")


class HealthCheckResponse(BaseDTO):
    """Health check response DTO."""
    status: str = Field(description="Service status")
