"""Authentication schemas."""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

MIN_USERNAME_LENGTH = 2
MIN_PASSWORD_LENGTH = 6


def require_fields(data: Any, fields: tuple[str, ...], message: str) -> Any:
    """Reject a request body where any of ``fields`` is absent or empty."""
    if isinstance(data, dict) and not all(data.get(field) for field in fields):
        raise ValueError(message)
    return data


def normalize_email(value: str) -> str:
    if not EMAIL_PATTERN.match(value):
        raise ValueError("Please provide a valid email address")
    return value.lower()


class UserRegister(BaseModel):
    """User registration request.

    Fields are declared in the order their checks are reported.
    """

    email: str = Field(..., max_length=255)
    username: str = Field(..., max_length=255)
    password: str

    @model_validator(mode="before")
    @classmethod
    def check_required(cls, data: Any) -> Any:
        return require_fields(data, ("username", "email", "password"), "All fields are required")

    @field_validator("email")
    @classmethod
    def check_email_format(cls, value: str) -> str:
        return normalize_email(value)

    @field_validator("username")
    @classmethod
    def check_username(cls, value: str) -> str:
        value = value.strip()
        if len(value) < MIN_USERNAME_LENGTH:
            raise ValueError(
                f"Username must be at least {MIN_USERNAME_LENGTH} characters long"
            )
        return value

    @field_validator("password")
    @classmethod
    def check_password(cls, value: str) -> str:
        if len(value) < MIN_PASSWORD_LENGTH:
            raise ValueError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
            )
        return value


class UserLogin(BaseModel):
    """User login request."""

    email: str = Field(..., max_length=255)
    password: str

    @model_validator(mode="before")
    @classmethod
    def check_required(cls, data: Any) -> Any:
        return require_fields(data, ("email", "password"), "Email and password are required")

    @field_validator("email")
    @classmethod
    def check_email_format(cls, value: str) -> str:
        return normalize_email(value)


class UserResponse(BaseModel):
    """Non-sensitive user summary."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str


class CurrentUser(BaseModel):
    """Caller identity decoded from a verified token."""

    id: int
    username: str


class RegisterResponse(BaseModel):
    """Registration response."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str = "User registered successfully"
    user_id: int = Field(..., alias="userId")


class AuthResponse(BaseModel):
    """Login response with token and user info."""

    success: bool = True
    token: str
    user: UserResponse
    message: str = "Login successful"
