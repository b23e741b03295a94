"""Schemas for property listings and listing filters."""

from datetime import datetime
from typing import Any, List, Mapping, Optional

from pydantic import AliasChoices, Field

from ._base import ApiModel, ApiRequestModel

DEFAULT_MAX_PRICE = 10000


class Coordinates(ApiModel):
    latitude: float
    longitude: float


class PropertyAddress(ApiModel):
    street: str
    city: str
    state: str
    zip_code: str
    country: str
    coordinates: Optional[Coordinates] = None


class Property(ApiModel):
    id: str = Field(validation_alias=AliasChoices("_id", "id"))
    owner_id: str
    title: str
    description: str
    address: PropertyAddress
    price: float
    bedrooms: int
    bathrooms: float
    square_feet: int
    amenities: List[str] = []
    images: List[str] = []
    availability: bool = True
    featured: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Pagination(ApiModel):
    total: int
    page: int
    limit: int
    pages: int


class PropertyPage(ApiModel):
    properties: List[Property]
    pagination: Pagination


class CreatePropertyData(ApiRequestModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    address: PropertyAddress
    price: float = Field(ge=0)
    bedrooms: int = Field(ge=0)
    bathrooms: float = Field(ge=0)
    square_feet: int = Field(ge=0)
    amenities: List[str] = []
    images: List[str] = []


class PropertyUpdate(ApiRequestModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    address: Optional[PropertyAddress] = None
    price: Optional[float] = Field(default=None, ge=0)
    bedrooms: Optional[int] = Field(default=None, ge=0)
    bathrooms: Optional[float] = Field(default=None, ge=0)
    square_feet: Optional[int] = Field(default=None, ge=0)
    amenities: Optional[List[str]] = None
    images: Optional[List[str]] = None


class ImageUploadResponse(ApiModel):
    images: List[str]


def _positive_number(raw: Any) -> Optional[float]:
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    return value or None


class PropertyFilters(ApiRequestModel):
    """Listing filters, shared by the API query and the browse page URL."""

    city: str = ""
    state: str = ""
    min_price: float = 0
    max_price: float = DEFAULT_MAX_PRICE
    bedrooms: int = 0
    bathrooms: float = 0
    amenities: List[str] = []
    page: Optional[int] = Field(default=None, ge=1)
    limit: Optional[int] = Field(default=None, ge=1)

    def to_query_params(self) -> dict[str, str]:
        """Return only the filters that are set; empty and zero values are dropped."""
        params: dict[str, str] = {}
        for name, value in self.model_dump(by_alias=True).items():
            if not value:
                continue
            if isinstance(value, list):
                params[name] = ",".join(value)
            elif isinstance(value, float) and value.is_integer():
                params[name] = str(int(value))
            else:
                params[name] = str(value)
        return params

    @classmethod
    def from_query_params(
        cls,
        params: Mapping[str, str],
        initial: Optional["PropertyFilters"] = None,
    ) -> "PropertyFilters":
        """URL params win over ``initial``; unparseable numbers fall back to it."""
        base = initial or cls()
        amenities = params.get("amenities")
        min_price = _positive_number(params.get("minPrice"))
        max_price = _positive_number(params.get("maxPrice"))
        bedrooms = _positive_number(params.get("bedrooms"))
        bathrooms = _positive_number(params.get("bathrooms"))
        return cls(
            city=params.get("city") or base.city,
            state=params.get("state") or base.state,
            min_price=min_price or base.min_price,
            max_price=max_price or base.max_price or DEFAULT_MAX_PRICE,
            bedrooms=int(bedrooms) if bedrooms else base.bedrooms,
            bathrooms=bathrooms or base.bathrooms,
            amenities=[a for a in amenities.split(",") if a] if amenities else list(base.amenities),
            page=base.page,
            limit=base.limit,
        )

    def toggle_amenity(self, amenity: str) -> "PropertyFilters":
        if amenity in self.amenities:
            amenities = [a for a in self.amenities if a != amenity]
        else:
            amenities = [*self.amenities, amenity]
        return self.model_copy(update={"amenities": amenities})

    @classmethod
    def reset(cls) -> "PropertyFilters":
        return cls()
