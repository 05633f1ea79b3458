"""Audio catalog schemas."""

from pydantic import ConfigDict

from app.models.audio_track import AudioCategory
from app.schemas.response_schema import CamelModel


class AudioTrackResponse(CamelModel):
    """A playable track."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: int
    title: str
    author: str | None = None
    duration: str
    category: AudioCategory
    audio_url: str
