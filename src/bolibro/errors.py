"""Error types raised by the Bolibro client."""

from __future__ import annotations

from typing import Any, Optional


class ApiError(Exception):
    """Base error for backend request failures."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ApiConnectionError(ApiError):
    """Raised when the backend cannot be reached."""


class ApiAuthError(ApiError):
    """Raised when the backend rejects authentication."""


class ApiNotFoundError(ApiError):
    """Raised when a backend resource is not found."""


class ApiRequestError(ApiError):
    """Raised for non-auth backend errors."""


class GeocodingError(Exception):
    """Raised when a geocoding request fails or returns an unusable body."""
