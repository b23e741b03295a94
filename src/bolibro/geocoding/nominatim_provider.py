"""Nominatim (OpenStreetMap) geocoding provider."""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from ..config import Settings
from ..errors import GeocodingError
from .base import AddressSuggestion, GeocodingProvider

logger = logging.getLogger(__name__)

_suggestions = TypeAdapter(list[AddressSuggestion])


class NominatimProvider(GeocodingProvider):
    def __init__(self, settings: Settings, http: Optional[httpx.AsyncClient] = None) -> None:
        self.base_url = settings.nominatim_url
        self.country_codes = settings.geocoding_country_codes
        self.limit = settings.geocoding_limit
        self.email = settings.nominatim_email
        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(
            timeout=settings.geocoding_timeout,
            headers={
                # Nominatim usage policy requires an identifying user agent.
                "User-Agent": settings.nominatim_user_agent,
                "Accept": "application/json",
                "Accept-Language": settings.geocoding_accept_language,
            },
        )

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    def _params(self, query: str) -> dict[str, Any]:
        params: dict[str, Any] = {
            "format": "json",
            "q": query,
            "countrycodes": self.country_codes,
            "limit": self.limit,
            "addressdetails": 1,
        }
        if self.email:
            params["email"] = self.email
        return params

    async def search(self, query: str) -> list[AddressSuggestion]:
        try:
            resp = await self.http.get(f"{self.base_url}/search", params=self._params(query))
        except httpx.HTTPError as exc:
            raise GeocodingError(f"nominatim_request_failed: {exc}") from exc

        if resp.status_code != 200:
            raise GeocodingError(f"nominatim_error_{resp.status_code}")

        try:
            return _suggestions.validate_python(resp.json())
        except (ValueError, ValidationError) as exc:
            raise GeocodingError("nominatim_invalid_response") from exc
