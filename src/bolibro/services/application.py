"""Tenant applications and the owner review workflow."""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import TypeAdapter

from ..client import BolibroClient
from ..enums import ApplicationStatus
from ..schemas.application import (
    Application,
    ApplicationFormData,
    BackgroundCheckData,
    StatusUpdate,
)

_applications = TypeAdapter(List[Application])


class ApplicationService:
    def __init__(self, client: BolibroClient) -> None:
        self.client = client

    async def submit_application(self, data: Union[ApplicationFormData, dict]) -> Application:
        payload = ApplicationFormData.coerce(data)
        return Application.model_validate(
            await self.client.post("/applications", json=payload.to_api())
        )

    async def get_tenant_applications(self) -> List[Application]:
        return _applications.validate_python(await self.client.get("/applications/tenant"))

    async def get_owner_applications(self) -> List[Application]:
        return _applications.validate_python(await self.client.get("/applications/owner"))

    async def get_application(self, application_id: str) -> Application:
        return Application.model_validate(
            await self.client.get(f"/applications/{application_id}")
        )

    async def update_application_status(
        self,
        application_id: str,
        status: ApplicationStatus,
        rejection_reason: Optional[str] = None,
    ) -> Application:
        payload = StatusUpdate(status=status, rejection_reason=rejection_reason)
        return Application.model_validate(
            await self.client.put(
                f"/applications/{application_id}/status", json=payload.to_api()
            )
        )

    async def start_background_check(self, application_id: str) -> Application:
        return Application.model_validate(
            await self.client.post(f"/applications/{application_id}/background-check")
        )

    async def update_background_check_results(
        self, application_id: str, data: Union[BackgroundCheckData, dict]
    ) -> Application:
        payload = BackgroundCheckData.coerce(data)
        return Application.model_validate(
            await self.client.put(
                f"/applications/{application_id}/background-check", json=payload.to_api()
            )
        )
