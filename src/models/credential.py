"""Credential record model."""

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class CredentialRecord(Base, TimestampMixin):
    """A saved site login belonging to exactly one user.

    The password column holds the secret as submitted; it is not encrypted
    beyond whatever the database itself provides.
    """

    __tablename__ = "passwords"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    site = Column(String(2048), nullable=False)
    username = Column(String(255), nullable=False)
    password = Column(Text, nullable=False)

    # Relationships
    owner = relationship("User", backref="credentials")
