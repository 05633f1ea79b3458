"""Read-only access to the audio catalog."""

from app.models.audio_track import AudioCategory
from app.repositories.audio_repo import AudioRepository
from app.schemas.audio_schema import AudioTrackResponse


class AudioService:
    """Lists catalog tracks; the catalog is shared by all users."""

    def __init__(self, audio_repo: AudioRepository) -> None:
        self._audio_repo = audio_repo

    async def list_tracks(
        self, category: AudioCategory | None = None
    ) -> list[AudioTrackResponse]:
        if category is None:
            tracks = await self._audio_repo.find_all()
        else:
            tracks = await self._audio_repo.find_by_category(category)
        return [AudioTrackResponse.model_validate(t) for t in tracks]
