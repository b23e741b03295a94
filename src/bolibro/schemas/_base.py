"""Schema baselines for backend payloads."""

from typing import Any, Type, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

_RequestT = TypeVar("_RequestT", bound="ApiRequestModel")


class ApiModel(BaseModel):
    """Response DTO base: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    def to_api(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class ApiRequestModel(ApiModel):
    """Request DTO base that forbids unexpected fields."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    @classmethod
    def coerce(cls: Type[_RequestT], data: Any) -> _RequestT:
        """Accept either an instance or a raw mapping from a form."""
        return data if isinstance(data, cls) else cls.model_validate(data)
