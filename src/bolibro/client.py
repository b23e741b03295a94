"""HTTP client for the Bolibro Rental backend API."""

from __future__ import annotations

import logging
from typing import Any, Optional
from uuid import uuid4

import httpx

from .config import Settings
from .errors import ApiAuthError, ApiConnectionError, ApiNotFoundError, ApiRequestError
from .session import SessionContext

logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = "Network error. Please check your connection."
DEFAULT_ERROR_MESSAGE = "An unexpected error occurred"


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
    return response.reason_phrase or DEFAULT_ERROR_MESSAGE


def _error_details(response: httpx.Response) -> dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


class BolibroClient:
    """HTTP client for the Bolibro backend API."""

    def __init__(
        self,
        settings: Settings,
        session: SessionContext,
        http: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings
        self.session = session
        self.http = http or httpx.AsyncClient(
            base_url=settings.api_url,
            headers={"Accept": "application/json"},
            timeout=httpx.Timeout(settings.api_timeout, connect=10.0),
        )

    async def __aenter__(self) -> "BolibroClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.http.aclose()

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        files: Any = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Send a request and map failures onto ``ApiError`` subclasses."""
        request_headers = {"X-Request-Id": str(uuid4())}
        if self.session.token:
            request_headers["Authorization"] = f"Bearer {self.session.token}"
        if headers:
            request_headers.update(headers)
        try:
            response = await self.http.request(
                method,
                path,
                params=params,
                json=json,
                files=files,
                headers=request_headers,
            )
        except httpx.HTTPError as exc:
            logger.error("backend_network_error", extra={"path": path, "error": str(exc)})
            raise ApiConnectionError(NETWORK_ERROR_MESSAGE) from exc

        status = response.status_code
        if status < 400:
            return response

        message = _error_message(response)
        details = _error_details(response)
        if status == 401:
            # Stale or revoked token: drop it so the next run starts logged out.
            self.session.logout()
            raise ApiAuthError(message, status_code=status, details=details)
        if status == 403:
            raise ApiAuthError(message, status_code=status, details=details)
        if status == 404:
            raise ApiNotFoundError(message, status_code=status, details=details)
        raise ApiRequestError(message, status_code=status, details=details)

    async def call(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        files: Any = None,
    ) -> Any:
        response = await self.request(method, path, params=params, json=json, files=files)
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return {"status_code": response.status_code, "text": response.text}

    async def get(self, path: str, *, params: Optional[dict[str, Any]] = None) -> Any:
        return await self.call("GET", path, params=params)

    async def post(self, path: str, *, json: Any = None, files: Any = None) -> Any:
        return await self.call("POST", path, json=json, files=files)

    async def put(self, path: str, *, json: Any = None) -> Any:
        return await self.call("PUT", path, json=json)

    async def delete(self, path: str) -> Any:
        return await self.call("DELETE", path)
