"""FastAPI dependencies for authentication and database."""

import logging
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.database import get_db
from src.schemas.auth import CurrentUser
from src.services.auth import TokenStatus, decode_access_token
from src.services.errors import AuthenticationError
from src.services.vault_service import VaultService, parse_record_id

logger = logging.getLogger(__name__)

# Missing credentials are handled below so they map to 401 with our message
security = HTTPBearer(auto_error=False)

TOKEN_ERRORS = {
    TokenStatus.EXPIRED: "Token expired. Please login again.",
    TokenStatus.INVALID: "Invalid token.",
}


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> CurrentUser:
    """Get the caller identity from the bearer token.

    Trusts the token signature alone; the user row is not re-read, so a token
    stays usable until it expires.
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Access denied. No token provided.")

    check = decode_access_token(credentials.credentials)
    if check.status is not TokenStatus.VALID:
        logger.warning(f"Rejected bearer token: {check.status.value}")
        raise AuthenticationError(TOKEN_ERRORS[check.status])

    return CurrentUser(id=check.user_id, username=check.username)


def get_vault_service(
    db: Annotated[Session, Depends(get_db)],
) -> VaultService:
    """Get vault service with dependencies."""
    return VaultService(db)


def get_record_id(record_id: str) -> int:
    """Validate the record id path segment."""
    return parse_record_id(record_id)
