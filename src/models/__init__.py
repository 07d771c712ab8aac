"""SQLAlchemy models."""

from src.models.credential import CredentialRecord
from src.models.user import User

__all__ = [
    "User",
    "CredentialRecord",
]
