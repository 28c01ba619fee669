"""Exceptions for the Advice feature."""
from typing import Any, Dict, Optional

from api.shared.exceptions import UpstreamError


class ProviderError(UpstreamError):
    """Raised when the Gemini call fails or yields no candidates.

    ``details`` carries the provider's payload when one was received.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, details=details)
