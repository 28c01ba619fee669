"""Shared exceptions for the Maternal Health API."""
from typing import Any, Dict, Optional


class MaternalAPIException(Exception):
    """Base exception for the Maternal Health API.

    ``status_code`` is the HTTP status the application-level handler uses when
    the exception reaches the request boundary.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        error_code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(MaternalAPIException):
    """Raised when input validation fails."""

    status_code = 400

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "VALIDATION_ERROR", details)


class NotFoundError(MaternalAPIException):
    """Raised when a resource is not found."""

    status_code = 404

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "NOT_FOUND", details)


class ConfigError(MaternalAPIException):
    """Raised when a required setting is missing."""

    status_code = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "CONFIG_ERROR", details)


class StoreError(MaternalAPIException):
    """Raised when database operations fail unexpectedly."""

    status_code = 500

    def __init__(self, message: str = "Server error", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "STORE_ERROR", details)


class UpstreamError(MaternalAPIException):
    """Raised when external service calls fail."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, "UPSTREAM_ERROR", details, status_code=status_code)
