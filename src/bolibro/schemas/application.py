"""Schemas for tenant rental applications."""

from datetime import datetime
from typing import List, Optional, Union

from pydantic import AliasChoices, Field, model_validator

from ..enums import ApplicationStatus, BackgroundCheckStatus
from ._base import ApiModel, ApiRequestModel
from .property import Property


class Employment(ApiModel):
    employer: str = Field(min_length=1)
    position: str = Field(min_length=1)
    income: float = Field(ge=1)
    years_employed: float = Field(ge=0)


class PreviousRental(ApiModel):
    has_rented_before: bool
    previous_landlord: Optional[str] = None
    previous_landlord_contact: Optional[str] = None
    rental_duration: Optional[float] = None


class Reference(ApiModel):
    name: str = Field(min_length=1)
    relationship: str = Field(min_length=1)
    contact: str = Field(min_length=1)


class ApplicationForm(ApiModel):
    employment: Employment
    previous_rental: PreviousRental
    references: List[Reference] = Field(min_length=1)
    additional_info: str = ""


class ApplicationFormData(ApiRequestModel):
    property_id: str = Field(min_length=1)
    id_card_url: str = ""
    application_form: ApplicationForm


class BackgroundCheckResults(ApiModel):
    passed: bool
    notes: str = ""
    completed_at: Optional[datetime] = None


class BackgroundCheckData(ApiRequestModel):
    passed: bool
    notes: str = ""


class StatusUpdate(ApiRequestModel):
    status: ApplicationStatus
    rejection_reason: Optional[str] = None

    @model_validator(mode="after")
    def _reason_only_for_rejection(self) -> "StatusUpdate":
        if self.rejection_reason and self.status is not ApplicationStatus.REJECTED:
            raise ValueError("rejection_reason is only valid when rejecting an application")
        return self


class Application(ApiModel):
    id: str = Field(validation_alias=AliasChoices("_id", "id"))
    property_id: Union[Property, str]
    tenant_id: str
    status: ApplicationStatus
    id_card_url: str = ""
    application_form: ApplicationForm
    background_check_status: BackgroundCheckStatus = BackgroundCheckStatus.NOT_STARTED
    background_check_results: Optional[BackgroundCheckResults] = None
    rejection_reason: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def populated_property(self) -> Optional[Property]:
        """The populated property, when the backend expanded the reference."""
        return self.property_id if isinstance(self.property_id, Property) else None
