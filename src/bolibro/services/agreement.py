"""Rental agreements: drafting, signing and termination."""

from __future__ import annotations

from typing import List, Union

from pydantic import TypeAdapter

from ..client import BolibroClient
from ..schemas.agreement import CreateAgreementData, RentalAgreement

_agreements = TypeAdapter(List[RentalAgreement])


class AgreementService:
    def __init__(self, client: BolibroClient) -> None:
        self.client = client

    async def create_agreement(self, data: Union[CreateAgreementData, dict]) -> RentalAgreement:
        payload = CreateAgreementData.coerce(data)
        return RentalAgreement.model_validate(
            await self.client.post("/agreements", json=payload.to_api())
        )

    async def get_agreement(self, agreement_id: str) -> RentalAgreement:
        return RentalAgreement.model_validate(
            await self.client.get(f"/agreements/{agreement_id}")
        )

    async def sign_agreement(self, agreement_id: str) -> RentalAgreement:
        return RentalAgreement.model_validate(
            await self.client.put(f"/agreements/{agreement_id}/sign")
        )

    async def get_tenant_agreements(self) -> List[RentalAgreement]:
        return _agreements.validate_python(await self.client.get("/agreements/tenant"))

    async def get_owner_agreements(self) -> List[RentalAgreement]:
        return _agreements.validate_python(await self.client.get("/agreements/owner"))

    async def terminate_agreement(
        self, agreement_id: str, termination_reason: str
    ) -> RentalAgreement:
        return RentalAgreement.model_validate(
            await self.client.put(
                f"/agreements/{agreement_id}/terminate",
                json={"terminationReason": termination_reason},
            )
        )
