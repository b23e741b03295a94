"""Schemas for rental agreements."""

from datetime import datetime
from typing import Optional, Union

from pydantic import AliasChoices, Field, model_validator

from ..enums import AgreementStatus
from ._base import ApiModel, ApiRequestModel
from .application import Application
from .property import Property


class Signature(ApiModel):
    signed_at: datetime
    ip_address: str = ""


class RentalAgreement(ApiModel):
    id: str = Field(validation_alias=AliasChoices("_id", "id"))
    application_id: Union[Application, str]
    property_id: Union[Property, str]
    tenant_id: str
    owner_id: str
    start_date: datetime
    end_date: datetime
    terms: str
    tenant_signature: Optional[Signature] = None
    owner_signature: Optional[Signature] = None
    status: AgreementStatus
    termination_reason: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        return self.status is AgreementStatus.BOTH_SIGNED


class CreateAgreementData(ApiRequestModel):
    application_id: str = Field(min_length=1)
    start_date: datetime
    end_date: datetime
    terms: str = Field(min_length=1)

    @model_validator(mode="after")
    def _end_after_start(self) -> "CreateAgreementData":
        if self.end_date <= self.start_date:
            raise ValueError("end_date must be after start_date")
        return self
