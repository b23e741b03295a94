"""Schemas for rent payments."""

from datetime import datetime
from typing import Optional, Union

from pydantic import AliasChoices, Field

from ..enums import PaymentStatus
from ._base import ApiModel
from .application import Application
from .property import Property


class BillingPeriod(ApiModel):
    start_date: datetime
    end_date: datetime


class Payment(ApiModel):
    id: str = Field(validation_alias=AliasChoices("_id", "id"))
    application_id: Union[Application, str]
    property_id: Union[Property, str]
    tenant_id: str
    owner_id: str
    amount: float
    currency: str = "usd"
    status: PaymentStatus
    payment_method: str = ""
    stripe_payment_intent_id: str = ""
    stripe_customer_id: Optional[str] = None
    billing_period: Optional[BillingPeriod] = None
    receipt_url: str = ""
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PaymentIntent(ApiModel):
    client_secret: str
    payment_id: str
