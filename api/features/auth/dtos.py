"""DTOs for the Auth feature."""
from typing import Optional

from pydantic import Field

from api.shared.dtos import BaseDTO


class CredentialsRequest(BaseDTO):
    """Email/password pair used by both signup and login.

    Fields are optional at the schema level so that missing values are
    reported with the feature's own 400 message.
    """

    email: Optional[str] = Field(default=None, description="Account email")
    password: Optional[str] = Field(default=None, description="Plaintext password")
