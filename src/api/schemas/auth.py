"""Pydantic schemas for registration, login and the current user."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from api.schemas.common import NonEmptyStr


class RegisterRequest(BaseModel):
    """Schema for creating an account."""

    name: NonEmptyStr
    email: EmailStr
    password: str = Field(..., min_length=6)


class LoginRequest(BaseModel):
    """Schema for exchanging credentials for a token."""

    email: EmailStr
    password: NonEmptyStr


class TokenResponse(BaseModel):
    """A freshly issued identity token."""

    model_config = ConfigDict(
        json_schema_extra={"example": {"token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9..."}}
    )

    token: str


class UserResponse(BaseModel):
    """The caller's user record. Never includes the password hash."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    name: str
    email: str
    avatar: str | None
    created_at: datetime = Field(alias="date")
