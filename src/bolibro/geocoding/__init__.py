from .base import AddressSuggestion, GeocodingProvider, ResolvedAddress, SuggestionAddress
from .factory import create_geocoding_provider
from .mock_provider import MockGeocodingProvider
from .nominatim_provider import NominatimProvider

__all__ = [
    "AddressSuggestion",
    "GeocodingProvider",
    "MockGeocodingProvider",
    "NominatimProvider",
    "ResolvedAddress",
    "SuggestionAddress",
    "create_geocoding_provider",
]
