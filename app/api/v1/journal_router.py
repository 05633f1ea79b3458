"""Journal endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.dependencies import CurrentUser, get_current_user, get_journal_service
from app.schemas.journal_schema import (
    CreateJournalRequest,
    JournalEntryResponse,
    UpdateJournalRequest,
)
from app.schemas.response_schema import ApiResponse, DeletedResponse, success_response
from app.services.journal_service import JournalService

router = APIRouter(prefix="/api/v1/journal", tags=["journal"])

JournalServiceDep = Annotated[JournalService, Depends(get_journal_service)]
CurrentUserDep = Annotated[CurrentUser, Depends(get_current_user)]


@router.post(
    "",
    response_model=ApiResponse[JournalEntryResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_entry(
    body: CreateJournalRequest,
    service: JournalServiceDep,
    current_user: CurrentUserDep,
) -> dict:
    """Create a journal entry."""
    result = await service.create(current_user.external_id, body)
    return success_response(result, status=201)


@router.get("", response_model=ApiResponse[list[JournalEntryResponse]])
async def list_entries(
    service: JournalServiceDep, current_user: CurrentUserDep
) -> dict:
    """List the caller's journal entries, newest first."""
    result = await service.list_entries(current_user.external_id)
    return success_response(result)


@router.get("/{entry_id}", response_model=ApiResponse[JournalEntryResponse])
async def get_entry(
    entry_id: int,
    service: JournalServiceDep,
    current_user: CurrentUserDep,
) -> dict:
    """Get a single journal entry."""
    result = await service.get(current_user.external_id, entry_id)
    return success_response(result)


@router.patch("/{entry_id}", response_model=ApiResponse[JournalEntryResponse])
async def update_entry(
    entry_id: int,
    body: UpdateJournalRequest,
    service: JournalServiceDep,
    current_user: CurrentUserDep,
) -> dict:
    """Partially update a journal entry."""
    result = await service.update(current_user.external_id, entry_id, body)
    return success_response(result)


@router.delete("/{entry_id}", response_model=ApiResponse[DeletedResponse])
async def delete_entry(
    entry_id: int,
    service: JournalServiceDep,
    current_user: CurrentUserDep,
) -> dict:
    """Delete a journal entry."""
    await service.delete(current_user.external_id, entry_id)
    return success_response(DeletedResponse())
