"""Credential record schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from src.schemas.auth import require_fields

MIN_SITE_LENGTH = 3


class CredentialWrite(BaseModel):
    """Create or replace a credential record."""

    site: str = Field(..., max_length=2048)
    username: str = Field(..., max_length=255)
    password: str

    @model_validator(mode="before")
    @classmethod
    def check_required(cls, data: Any) -> Any:
        return require_fields(
            data,
            ("site", "username", "password"),
            "Site, username, and password are required",
        )

    @field_validator("site")
    @classmethod
    def check_site(cls, value: str) -> str:
        value = value.strip()
        if len(value) < MIN_SITE_LENGTH:
            raise ValueError(f"Site must be at least {MIN_SITE_LENGTH} characters long")
        return value

    @field_validator("username")
    @classmethod
    def check_username(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Username cannot be empty")
        return value

    @field_validator("password")
    @classmethod
    def check_password(cls, value: str) -> str:
        # Stored verbatim, no trimming
        if not value:
            raise ValueError("Password cannot be empty")
        return value


class CredentialResponse(BaseModel):
    """Credential record as returned to its owner."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int = Field(..., alias="_id")
    site: str
    username: str
    password: str
    owner_id: int = Field(..., alias="userId")
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")


class CredentialCreated(BaseModel):
    """Response for a newly saved record."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    inserted_id: int = Field(..., alias="insertedId")
    message: str = "Password saved successfully"


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    success: bool = True
    message: str
