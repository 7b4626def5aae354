"""
Exception types shared by the API wrappers and geocoding.

Views catch these at the interaction point and surface ``message`` to the user.
"""

from typing import Optional


class ApiError(Exception):
    """Raised when a backend call fails (network error or non-2xx response).

    Attributes:
        message: human-readable message, taken from the backend when available
        status_code: HTTP status code, or None for network-level failures
    """

    def __init__(self, message: str = "Request failed", status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return self.message


class AuthenticationError(ApiError):
    """Raised when no token is available or the backend rejects it (401)."""

    def __init__(self, message: str = "Authentication failed", status_code: Optional[int] = 401):
        super().__init__(message, status_code=status_code)


class GeocodingError(Exception):
    """Raised when the location search service cannot be reached or answers badly."""
