"""Aggregated views for the owner and tenant dashboards."""

from typing import List

from pydantic import BaseModel

from .agreement import RentalAgreement
from .application import Application
from .payment import Payment
from .property import Property


class OwnerStats(BaseModel):
    total_properties: int
    available_properties: int
    pending_applications: int
    active_agreements: int
    monthly_revenue: float


class OwnerDashboard(BaseModel):
    properties: List[Property]
    applications: List[Application]
    payments: List[Payment]
    agreements: List[RentalAgreement]
    stats: OwnerStats


class TenantDashboard(BaseModel):
    applications: List[Application]
    approved_applications: List[Application]
