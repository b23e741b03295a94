"""Account registration, login and profile management."""

from __future__ import annotations

import logging
from typing import Union

from ..client import BolibroClient
from ..schemas.auth import (
    AuthResponse,
    LoginRequest,
    MessageResponse,
    ProfileUpdate,
    RegisterRequest,
    User,
)

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, client: BolibroClient) -> None:
        self.client = client
        self.session = client.session

    async def register(self, data: Union[RegisterRequest, dict]) -> AuthResponse:
        payload = RegisterRequest.coerce(data)
        result = AuthResponse.model_validate(
            await self.client.post("/auth/register", json=payload.to_api())
        )
        self.session.login(result.user, token=result.token)
        logger.info("user_registered", extra={"user_id": result.user.id})
        return result

    async def login(self, data: Union[LoginRequest, dict]) -> AuthResponse:
        payload = LoginRequest.coerce(data)
        result = AuthResponse.model_validate(
            await self.client.post("/auth/login", json=payload.to_api())
        )
        self.session.login(result.user, token=result.token)
        return result

    async def get_current_user(self) -> User:
        return User.model_validate(await self.client.get("/auth/me"))

    async def update_profile(self, data: Union[ProfileUpdate, dict]) -> User:
        payload = ProfileUpdate.coerce(data)
        user = User.model_validate(await self.client.put("/auth/me", json=payload.to_api()))
        if self.session.is_authenticated:
            self.session.login(user)
        return user

    def logout(self) -> None:
        self.session.logout()

    async def forgot_password(self, email: str) -> MessageResponse:
        return MessageResponse.model_validate(
            await self.client.post("/auth/forgot-password", json={"email": email})
        )

    async def reset_password(self, token: str, new_password: str) -> MessageResponse:
        return MessageResponse.model_validate(
            await self.client.post(
                "/auth/reset-password",
                json={"token": token, "newPassword": new_password},
            )
        )
