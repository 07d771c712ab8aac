"""Vault service for owner-scoped credential records."""

import logging

from sqlalchemy.orm import Session

from src.models.credential import CredentialRecord
from src.models.mixins import utcnow
from src.schemas.credential import CredentialWrite
from src.services.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

# Largest value a 32-bit integer primary key can hold
MAX_RECORD_ID = 2**31 - 1

NOT_FOUND_MESSAGE = "Password not found or access denied"


def parse_record_id(raw_id: str) -> int:
    """Parse a record id from a URL segment.

    Raises ValidationError when the value cannot be a key in the store.
    """
    if not (raw_id.isascii() and raw_id.isdigit()):
        raise ValidationError("Invalid password ID format")
    record_id = int(raw_id)
    if not 0 < record_id <= MAX_RECORD_ID:
        raise ValidationError("Invalid password ID format")
    return record_id


class VaultService:
    """Service for credential CRUD, always scoped to a single owner.

    A record that exists but belongs to someone else is reported exactly like
    a record that does not exist.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_credentials(self, owner_id: int) -> list[CredentialRecord]:
        """Get all of the owner's records, newest first."""
        records = (
            self.db.query(CredentialRecord)
            .filter(CredentialRecord.owner_id == owner_id)
            .order_by(CredentialRecord.created_at.desc(), CredentialRecord.id.desc())
            .all()
        )
        logger.info(f"Retrieved {len(records)} passwords for user {owner_id}")
        return records

    def get_owned_credential(self, record_id: int, owner_id: int) -> CredentialRecord:
        """Get a record by id if it belongs to the owner."""
        record = (
            self.db.query(CredentialRecord)
            .filter(CredentialRecord.id == record_id, CredentialRecord.owner_id == owner_id)
            .first()
        )
        if record is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return record

    def create_credential(self, owner_id: int, data: CredentialWrite) -> CredentialRecord:
        """Save a new record for the owner."""
        now = utcnow()
        record = CredentialRecord(
            owner_id=owner_id,
            site=data.site,
            username=data.username,
            password=data.password,
            created_at=now,
            updated_at=now,
        )
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)

        logger.info(f"Password saved: {record.id}")
        return record

    def update_credential(
        self, record_id: int, owner_id: int, data: CredentialWrite
    ) -> CredentialRecord:
        """Replace a record's site, username and password."""
        record = self.get_owned_credential(record_id, owner_id)

        record.site = data.site
        record.username = data.username
        record.password = data.password
        record.updated_at = utcnow()

        self.db.commit()
        self.db.refresh(record)

        logger.info(f"Password updated: {record_id}")
        return record

    def delete_credential(self, record_id: int, owner_id: int) -> None:
        """Permanently delete a record."""
        record = self.get_owned_credential(record_id, owner_id)

        self.db.delete(record)
        self.db.commit()

        logger.info(f"Password deleted: {record_id}")
