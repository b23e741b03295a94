"""Factory for geocoding providers."""

import logging
from typing import Optional

from ..config import Settings
from .base import GeocodingProvider
from .mock_provider import MockGeocodingProvider
from .nominatim_provider import NominatimProvider

logger = logging.getLogger(__name__)


def create_geocoding_provider(
    settings: Settings, provider_override: Optional[str] = None
) -> GeocodingProvider:
    name = (provider_override or settings.geocoding_provider or "nominatim").lower()
    provider: GeocodingProvider
    if name == "nominatim":
        provider = NominatimProvider(settings)
    elif name == "mock":
        provider = MockGeocodingProvider(limit=settings.geocoding_limit)
    else:
        logger.warning("unknown_geocoding_provider", extra={"provider": name})
        provider = NominatimProvider(settings)
    return provider
