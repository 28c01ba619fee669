"""Exceptions for the Auth feature."""
from typing import Any, Dict, Optional

from api.shared.exceptions import MaternalAPIException, NotFoundError


class AuthException(MaternalAPIException):
    """Base exception for authentication operations."""
    pass


class DuplicateAccountError(AuthException):
    """Raised when signing up with an email that is already registered."""

    status_code = 400

    def __init__(self, email: str):
        super().__init__(
            "User already exists or invalid data", "DUPLICATE_ACCOUNT", {"email": email}
        )


class InvalidCredentialsError(AuthException):
    """Raised when the password does not match the stored hash."""

    status_code = 401

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__("Invalid credentials", "INVALID_CREDENTIALS", details)


class AccountNotFoundError(NotFoundError):
    """Raised when no account matches an email."""

    def __init__(self, email: str):
        super().__init__("User not found", {"email": email})


class UnknownLoginError(AuthException):
    """Raised when logging in with an email that has no account.

    Reported as a client error; other scoped operations use 404.
    """

    status_code = 400

    def __init__(self):
        super().__init__("User not found", "UNKNOWN_ACCOUNT")
