"""Owner and tenant dashboard aggregation."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Iterable, Optional

from ..enums import ApplicationStatus, PaymentStatus
from ..schemas.dashboard import OwnerDashboard, OwnerStats, TenantDashboard
from ..schemas.payment import Payment
from .agreement import AgreementService
from .application import ApplicationService
from .payment import PaymentService
from .property import PropertyService

logger = logging.getLogger(__name__)


def monthly_revenue(payments: Iterable[Payment], now: datetime) -> float:
    """Sum completed payments created in the same calendar month as ``now``."""
    total = 0.0
    for payment in payments:
        created = payment.created_at
        if created is None or payment.status is not PaymentStatus.COMPLETED:
            continue
        if created.tzinfo is not None and now.tzinfo is not None:
            created = created.astimezone(now.tzinfo)
        if (created.year, created.month) == (now.year, now.month):
            total += payment.amount
    return total


class DashboardService:
    def __init__(
        self,
        properties: PropertyService,
        applications: ApplicationService,
        payments: PaymentService,
        agreements: AgreementService,
    ) -> None:
        self.properties = properties
        self.applications = applications
        self.payments = payments
        self.agreements = agreements

    async def owner_dashboard(self, now: Optional[datetime] = None) -> OwnerDashboard:
        try:
            properties, applications, payments, agreements = await asyncio.gather(
                self.properties.get_owner_properties(),
                self.applications.get_owner_applications(),
                self.payments.get_owner_payments(),
                self.agreements.get_owner_agreements(),
            )
        except Exception:
            logger.exception("owner_dashboard_fetch_failed")
            raise

        stats = OwnerStats(
            total_properties=len(properties),
            available_properties=sum(1 for p in properties if p.availability),
            pending_applications=sum(
                1 for a in applications if a.status is ApplicationStatus.PENDING
            ),
            active_agreements=sum(1 for a in agreements if a.is_active),
            monthly_revenue=monthly_revenue(payments, now or datetime.now(timezone.utc)),
        )
        return OwnerDashboard(
            properties=properties,
            applications=applications,
            payments=payments,
            agreements=agreements,
            stats=stats,
        )

    async def tenant_dashboard(self) -> TenantDashboard:
        applications = await self.applications.get_tenant_applications()
        approved = [a for a in applications if a.status is ApplicationStatus.APPROVED]
        return TenantDashboard(applications=applications, approved_applications=approved)
