"""Mood logging and statistics endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.dependencies import CurrentUser, get_current_user, get_mood_service
from app.schemas.mood_schema import (
    CreateMoodRequest,
    MoodEntryResponse,
    MoodStatsResponse,
    WeeklyMoodDay,
)
from app.schemas.response_schema import ApiResponse, success_response
from app.services.mood_service import MoodService

router = APIRouter(prefix="/api/v1/mood", tags=["mood"])

MoodServiceDep = Annotated[MoodService, Depends(get_mood_service)]
CurrentUserDep = Annotated[CurrentUser, Depends(get_current_user)]


@router.post(
    "",
    response_model=ApiResponse[MoodEntryResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_mood(
    body: CreateMoodRequest,
    service: MoodServiceDep,
    current_user: CurrentUserDep,
) -> dict:
    """Log a mood entry."""
    result = await service.create(current_user.external_id, body)
    return success_response(result, status=201)


@router.get("/weekly", response_model=ApiResponse[list[WeeklyMoodDay]])
async def get_weekly(service: MoodServiceDep, current_user: CurrentUserDep) -> dict:
    """Scores for the last 7 days; days without an entry have a null score."""
    result = await service.weekly(current_user.external_id)
    return success_response(result)


@router.get("/stats", response_model=ApiResponse[MoodStatsResponse])
async def get_stats(service: MoodServiceDep, current_user: CurrentUserDep) -> dict:
    """Percentage breakdown per emotion for the last 30 days."""
    result = await service.stats(current_user.external_id)
    return success_response(result)
