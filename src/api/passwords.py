"""Password vault API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_current_user, get_record_id, get_vault_service
from src.schemas.auth import CurrentUser
from src.schemas.credential import (
    CredentialCreated,
    CredentialResponse,
    CredentialWrite,
    MessageResponse,
)
from src.services.vault_service import VaultService

router = APIRouter(prefix="/api/passwords", tags=["passwords"])

# current_user is declared first in every route so the token gate runs before
# a database session is opened.


@router.get("", response_model=list[CredentialResponse])
async def get_passwords(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[VaultService, Depends(get_vault_service)],
):
    """Get all passwords of the current user, newest first."""
    records = service.list_credentials(current_user.id)
    return [CredentialResponse.model_validate(record) for record in records]


@router.post("", response_model=CredentialCreated, status_code=status.HTTP_201_CREATED)
async def create_password(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[VaultService, Depends(get_vault_service)],
    password_data: CredentialWrite,
):
    """Save a password."""
    record = service.create_credential(current_user.id, password_data)
    return CredentialCreated(inserted_id=record.id)


@router.put("/{record_id}", response_model=MessageResponse)
async def update_password(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    record_id: Annotated[int, Depends(get_record_id)],
    service: Annotated[VaultService, Depends(get_vault_service)],
    password_data: CredentialWrite,
):
    """Update a password by id."""
    service.update_credential(record_id, current_user.id, password_data)
    return MessageResponse(message="Password updated successfully")


@router.delete("/{record_id}", response_model=MessageResponse)
async def delete_password(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    record_id: Annotated[int, Depends(get_record_id)],
    service: Annotated[VaultService, Depends(get_vault_service)],
):
    """Delete a password by id."""
    service.delete_credential(record_id, current_user.id)
    return MessageResponse(message="Password deleted successfully")
