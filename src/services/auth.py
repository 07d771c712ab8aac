"""Authentication service for JWT and password handling."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from enum import Enum

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.config import get_settings
from src.models.user import User
from src.services.errors import ConflictError

logger = logging.getLogger(__name__)

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)


class LoginOutcome(str, Enum):
    """Result of checking a login attempt."""

    OK = "ok"
    # Covers both unknown email and wrong password
    INVALID_CREDENTIALS = "invalid_credentials"


class TokenStatus(str, Enum):
    """Result of verifying a bearer token."""

    VALID = "valid"
    EXPIRED = "expired"
    INVALID = "invalid"


@dataclass(frozen=True)
class LoginResult:
    outcome: LoginOutcome
    user: User | None = None


@dataclass(frozen=True)
class TokenCheck:
    status: TokenStatus
    user_id: int | None = None
    username: str | None = None


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(user_id: int, username: str) -> str:
    """Create a JWT access token."""
    expire = datetime.now(UTC) + timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode = {
        "sub": str(user_id),
        "username": username,
        "exp": expire,
    }
    encoded_jwt = jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    return encoded_jwt


def decode_access_token(token: str) -> TokenCheck:
    """Verify a JWT's signature and expiry and extract the caller identity.

    Pure computation: the signature is trusted as the source of truth, so no
    database lookup happens here.
    """
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except ExpiredSignatureError:
        return TokenCheck(TokenStatus.EXPIRED)
    except JWTError:
        return TokenCheck(TokenStatus.INVALID)

    user_id = payload.get("sub")
    username = payload.get("username")
    if not isinstance(user_id, str) or not user_id.isdigit() or not isinstance(username, str):
        return TokenCheck(TokenStatus.INVALID)

    return TokenCheck(TokenStatus.VALID, user_id=int(user_id), username=username)


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email (case-insensitive)."""
    return db.query(User).filter(User.email == email.lower()).first()


def get_user_by_username(db: Session, username: str) -> User | None:
    """Get a user by username (case-insensitive)."""
    return (
        db.query(User).filter(func.lower(User.username) == username.strip().lower()).first()
    )


def find_identity_conflict(db: Session, email: str, username: str) -> str | None:
    """Return the name of the first identity field already taken, if any.

    Email is checked before username.
    """
    if get_user_by_email(db, email):
        return "Email"
    if get_user_by_username(db, username):
        return "Username"
    return None


def create_user(db: Session, username: str, email: str, password: str) -> User:
    """Create a new user, rejecting duplicate emails and usernames."""
    username = username.strip()
    email = email.lower()

    conflict = find_identity_conflict(db, email, username)
    if conflict:
        raise ConflictError(f"{conflict} already exists")

    user = User(username=username, email=email, password_hash=get_password_hash(password))
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration
        db.rollback()
        conflict = find_identity_conflict(db, email, username)
        if conflict is None:
            raise
        raise ConflictError(f"{conflict} already exists") from None
    db.refresh(user)

    logger.info(f"User registered: {user.id}")
    return user


def authenticate_user(db: Session, email: str, password: str) -> LoginResult:
    """Authenticate a user by email and password.

    Unknown email and wrong password produce the same outcome. A dummy hash
    check runs for unknown emails so both paths take comparable time.
    """
    user = get_user_by_email(db, email)
    if not user:
        pwd_context.dummy_verify()
        return LoginResult(LoginOutcome.INVALID_CREDENTIALS)
    if not verify_password(password, user.password_hash):
        return LoginResult(LoginOutcome.INVALID_CREDENTIALS)
    return LoginResult(LoginOutcome.OK, user=user)
