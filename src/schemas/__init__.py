"""Pydantic schemas for API request/response validation."""

from src.schemas.auth import (
    AuthResponse,
    CurrentUser,
    RegisterResponse,
    UserLogin,
    UserRegister,
    UserResponse,
)
from src.schemas.credential import (
    CredentialCreated,
    CredentialResponse,
    CredentialWrite,
    MessageResponse,
)

__all__ = [
    "AuthResponse",
    "CurrentUser",
    "RegisterResponse",
    "UserLogin",
    "UserRegister",
    "UserResponse",
    "CredentialCreated",
    "CredentialResponse",
    "CredentialWrite",
    "MessageResponse",
]
