"""Domain errors and the HTTP status each maps to."""

from fastapi import status


class VaultError(Exception):
    """Base class for errors returned to API clients."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    headers: dict[str, str] | None = None

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(VaultError):
    """Malformed or missing input."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(VaultError):
    """A unique identity field is already taken."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(VaultError):
    """Bad credentials, or a missing, invalid or expired token."""

    status_code = status.HTTP_401_UNAUTHORIZED
    headers = {"WWW-Authenticate": "Bearer"}


class NotFoundError(VaultError):
    """Record is absent or owned by someone else."""

    status_code = status.HTTP_404_NOT_FOUND


class InternalError(VaultError):
    """Unexpected failure."""


INTERNAL_ERROR_MESSAGE = "Internal server error"
