"""Mock geocoding provider for offline development and tests (no network calls)."""

from typing import List

from .base import AddressSuggestion, GeocodingProvider, SuggestionAddress

_FIXTURES = [
    AddressSuggestion(
        place_id=1,
        display_name="1600 Amphitheatre Parkway, Mountain View, CA 94043, United States",
        lat="37.4224",
        lon="-122.0842",
        address=SuggestionAddress(
            house_number="1600",
            road="Amphitheatre Parkway",
            city="Mountain View",
            state="California",
            postcode="94043",
            country="United States",
        ),
    ),
    AddressSuggestion(
        place_id=2,
        display_name="1515 Broadway, New York, NY 10036, United States",
        lat="40.7580",
        lon="-73.9855",
        address=SuggestionAddress(
            house_number="1515",
            road="Broadway",
            city="New York",
            state="New York",
            postcode="10036",
            country="United States",
        ),
    ),
]


class MockGeocodingProvider(GeocodingProvider):
    def __init__(self, limit: int = 5) -> None:
        self.limit = limit
        self.queries: List[str] = []

    async def search(self, query: str) -> List[AddressSuggestion]:
        self.queries.append(query)
        needle = query.strip().lower()
        matches = [s for s in _FIXTURES if needle and needle in s.label.lower()]
        return matches[: self.limit]
