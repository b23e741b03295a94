"""Provider-agnostic geocoding interfaces."""

from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def _to_float(raw: Optional[str]) -> float:
    try:
        return float(raw) if raw is not None else 0.0
    except ValueError:
        return 0.0


class SuggestionAddress(BaseModel):
    """Partially structured postal address attached to a suggestion."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    house_number: Optional[str] = None
    road: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postcode: Optional[str] = None
    country: Optional[str] = None


class AddressSuggestion(BaseModel):
    """One candidate match for a free-text address query."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    place_id: int
    label: str = Field(alias="display_name")
    lat: str
    lon: str
    address: SuggestionAddress = SuggestionAddress()

    def resolve(self) -> "ResolvedAddress":
        parts = self.address
        return ResolvedAddress(
            formatted_address=self.label,
            lat=_to_float(self.lat),
            lng=_to_float(self.lon),
            street_number=parts.house_number or "",
            route=parts.road or "",
            city=parts.city or "",
            state=parts.state or "",
            postal_code=parts.postcode or "",
            country=parts.country or "",
        )


class ResolvedAddress(BaseModel):
    """Normalized address handed to the caller once a suggestion is selected."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    formatted_address: str = ""
    lat: float = 0.0
    lng: float = 0.0
    street_number: str = ""
    route: str = ""
    city: str = ""
    state: str = ""
    postal_code: str = ""
    country: str = ""

    def to_callback_payload(self) -> dict:
        return self.model_dump(by_alias=True)


class GeocodingProvider(ABC):
    @abstractmethod
    async def search(self, query: str) -> list[AddressSuggestion]:
        """Return candidates in service order; raise ``GeocodingError`` on failure."""

    async def geocode(self, address: str) -> Optional[ResolvedAddress]:
        results = await self.search(address)
        if not results:
            return None
        return results[0].resolve()

    async def aclose(self) -> None:
        return None
