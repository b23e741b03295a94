"""Property listing CRUD."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Union

from pydantic import TypeAdapter

from ..client import BolibroClient
from ..schemas.auth import MessageResponse
from ..schemas.property import (
    CreatePropertyData,
    ImageUploadResponse,
    Property,
    PropertyFilters,
    PropertyPage,
    PropertyUpdate,
)
from .upload import file_part

_properties = TypeAdapter(List[Property])


class PropertyService:
    def __init__(self, client: BolibroClient) -> None:
        self.client = client

    async def list_properties(self, filters: Optional[PropertyFilters] = None) -> PropertyPage:
        params = (filters or PropertyFilters()).to_query_params()
        return PropertyPage.model_validate(await self.client.get("/properties", params=params))

    async def get_property(self, property_id: str) -> Property:
        return Property.model_validate(await self.client.get(f"/properties/{property_id}"))

    async def create_property(self, data: Union[CreatePropertyData, dict]) -> Property:
        payload = CreatePropertyData.coerce(data)
        return Property.model_validate(await self.client.post("/properties", json=payload.to_api()))

    async def update_property(
        self, property_id: str, data: Union[PropertyUpdate, dict]
    ) -> Property:
        payload = PropertyUpdate.coerce(data)
        return Property.model_validate(
            await self.client.put(f"/properties/{property_id}", json=payload.to_api())
        )

    async def delete_property(self, property_id: str) -> MessageResponse:
        return MessageResponse.model_validate(
            await self.client.delete(f"/properties/{property_id}") or {}
        )

    async def get_owner_properties(self) -> List[Property]:
        return _properties.validate_python(await self.client.get("/properties/owner"))

    async def upload_property_images(
        self, property_id: str, images: Iterable[Path]
    ) -> ImageUploadResponse:
        files = [("images", file_part(Path(image))) for image in images]
        return ImageUploadResponse.model_validate(
            await self.client.post(f"/properties/{property_id}/images", files=files)
        )
