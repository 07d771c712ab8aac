"""Authentication API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from src.database import get_db
from src.schemas.auth import AuthResponse, RegisterResponse, UserLogin, UserRegister, UserResponse
from src.services.auth import LoginOutcome, authenticate_user, create_access_token, create_user
from src.services.errors import AuthenticationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])

# Shared by unknown-email and wrong-password failures
INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserRegister,
    db: Annotated[Session, Depends(get_db)],
):
    """Register a new user."""
    user = create_user(db, user_data.username, user_data.email, user_data.password)
    return RegisterResponse(user_id=user.id)


@router.post("/login", response_model=AuthResponse)
async def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
):
    """Login with email and password."""
    result = authenticate_user(db, credentials.email, credentials.password)

    if result.outcome is not LoginOutcome.OK:
        logger.warning("Failed login attempt")
        raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

    user = result.user
    token = create_access_token(user.id, user.username)
    logger.info(f"User logged in: {user.id}")

    return AuthResponse(token=token, user=UserResponse.model_validate(user))
