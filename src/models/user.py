"""User model."""

from sqlalchemy import Column, Index, Integer, String, func

from src.database import Base
from src.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication and vault ownership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)  # stored lower-cased
    password_hash = Column(String(255), nullable=False)

    __table_args__ = (Index("ix_users_username_lower", func.lower(username), unique=True),)
