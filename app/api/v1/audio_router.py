"""Audio catalog endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.dependencies import get_audio_service
from app.models.audio_track import AudioCategory
from app.schemas.audio_schema import AudioTrackResponse
from app.schemas.response_schema import ApiResponse, success_response
from app.services.audio_service import AudioService

router = APIRouter(prefix="/api/v1/audio", tags=["audio"])

AudioServiceDep = Annotated[AudioService, Depends(get_audio_service)]


@router.get("", response_model=ApiResponse[list[AudioTrackResponse]])
async def list_tracks(service: AudioServiceDep) -> dict:
    """All tracks ordered by category and title."""
    result = await service.list_tracks()
    return success_response(result)


@router.get("/{category}", response_model=ApiResponse[list[AudioTrackResponse]])
async def list_tracks_by_category(
    category: AudioCategory, service: AudioServiceDep
) -> dict:
    """Tracks of one category (relaxing | workout) ordered by title."""
    result = await service.list_tracks(category)
    return success_response(result)
