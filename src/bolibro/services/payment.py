"""Rent payment records."""

from __future__ import annotations

from typing import List

from pydantic import TypeAdapter

from ..client import BolibroClient
from ..schemas.payment import Payment, PaymentIntent

_payments = TypeAdapter(List[Payment])


class PaymentService:
    def __init__(self, client: BolibroClient) -> None:
        self.client = client

    async def create_payment_intent(self, application_id: str) -> PaymentIntent:
        return PaymentIntent.model_validate(
            await self.client.post(
                "/payments/create-intent", json={"applicationId": application_id}
            )
        )

    async def confirm_payment(self, payment_intent_id: str) -> Payment:
        return Payment.model_validate(
            await self.client.post(
                "/payments/confirm", json={"paymentIntentId": payment_intent_id}
            )
        )

    async def get_tenant_payments(self) -> List[Payment]:
        return _payments.validate_python(await self.client.get("/payments/tenant"))

    async def get_owner_payments(self) -> List[Payment]:
        return _payments.validate_python(await self.client.get("/payments/owner"))

    async def get_payment(self, payment_id: str) -> Payment:
        return Payment.model_validate(await self.client.get(f"/payments/{payment_id}"))

    async def get_payment_receipt(self, payment_id: str) -> str:
        response = await self.client.request("GET", f"/payments/{payment_id}/receipt")
        return response.text
