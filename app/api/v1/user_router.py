"""User profile endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.dependencies import CurrentUser, get_current_user, get_user_service
from app.schemas.response_schema import ApiResponse, DeletedResponse, success_response
from app.schemas.user_schema import UpdateProfileRequest, UserProfileResponse
from app.services.user_service import UserService

router = APIRouter(prefix="/api/v1/user", tags=["user"])

UserServiceDep = Annotated[UserService, Depends(get_user_service)]
CurrentUserDep = Annotated[CurrentUser, Depends(get_current_user)]


@router.get("/me", response_model=ApiResponse[UserProfileResponse])
async def get_profile(service: UserServiceDep, current_user: CurrentUserDep) -> dict:
    """Return the caller's profile, creating it on first login."""
    result = await service.get_or_create(
        external_id=current_user.external_id,
        email=current_user.email,
        name=current_user.name,
        avatar_url=current_user.avatar_url,
    )
    return success_response(result)


@router.patch("/me", response_model=ApiResponse[UserProfileResponse])
async def update_profile(
    body: UpdateProfileRequest,
    service: UserServiceDep,
    current_user: CurrentUserDep,
) -> dict:
    """Update the caller's display name."""
    result = await service.update_profile(current_user.external_id, body)
    return success_response(result)


@router.delete("/me", response_model=ApiResponse[DeletedResponse])
async def delete_account(service: UserServiceDep, current_user: CurrentUserDep) -> dict:
    """Delete the caller's account and all of their data."""
    await service.delete_account(current_user.external_id)
    return success_response(DeletedResponse(), message="Account deleted")
