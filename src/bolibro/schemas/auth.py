"""Schemas for registration, login and the current user."""

import re
from typing import Optional

from pydantic import AliasChoices, EmailStr, Field, field_validator

from ..enums import UserType
from ._base import ApiModel, ApiRequestModel

_PHONE_RE = re.compile(r"^\+?[\d\s\-()]+$")


class User(ApiModel):
    id: str = Field(validation_alias=AliasChoices("_id", "id"))
    email: EmailStr
    first_name: str
    last_name: str
    user_type: UserType
    phone_number: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class AuthResponse(ApiModel):
    user: User
    token: str


class LoginRequest(ApiRequestModel):
    email: EmailStr
    password: str = Field(min_length=1)


class RegisterRequest(ApiRequestModel):
    email: EmailStr
    password: str
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    phone_number: str = Field(min_length=10)
    user_type: UserType

    @field_validator("password")
    @classmethod
    def _password_strength(cls, value: str) -> str:
        if len(value) < 8:
            raise ValueError("Password must be at least 8 characters")
        if not re.search(r"[A-Z]", value):
            raise ValueError("Password must contain at least one uppercase letter")
        if not re.search(r"[a-z]", value):
            raise ValueError("Password must contain at least one lowercase letter")
        if not re.search(r"[0-9]", value):
            raise ValueError("Password must contain at least one number")
        return value

    @field_validator("phone_number")
    @classmethod
    def _phone_format(cls, value: str) -> str:
        if not _PHONE_RE.match(value):
            raise ValueError("Please enter a valid phone number")
        return value


class ProfileUpdate(ApiRequestModel):
    first_name: Optional[str] = Field(default=None, min_length=1)
    last_name: Optional[str] = Field(default=None, min_length=1)
    phone_number: Optional[str] = None
    email: Optional[EmailStr] = None


class MessageResponse(ApiModel):
    message: str = ""
