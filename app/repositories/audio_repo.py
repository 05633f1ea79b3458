"""Audio catalog repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.audio_track import AudioCategory, AudioTrack


class AudioRepository:
    """Encapsulates audio catalog queries."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_all(self) -> list[AudioTrack]:
        """Every track, grouped by category then ordered by title."""
        result = await self._session.execute(
            select(AudioTrack).order_by(AudioTrack.category, AudioTrack.title)
        )
        return list(result.scalars().all())

    async def find_by_category(self, category: AudioCategory) -> list[AudioTrack]:
        """Tracks of a single category ordered by title."""
        result = await self._session.execute(
            select(AudioTrack)
            .where(AudioTrack.category == category)
            .order_by(AudioTrack.title)
        )
        return list(result.scalars().all())

    async def exists_by_url(self, audio_url: str) -> bool:
        """Check if a track with this URL is already in the catalog."""
        result = await self._session.execute(
            select(AudioTrack.id).where(AudioTrack.audio_url == audio_url)
        )
        return result.first() is not None

    async def create(
        self,
        title: str,
        duration: str,
        category: AudioCategory,
        audio_url: str,
        author: str | None = None,
    ) -> AudioTrack:
        """Add a track to the catalog."""
        track = AudioTrack(
            title=title,
            author=author,
            duration=duration,
            category=category,
            audio_url=audio_url,
        )
        self._session.add(track)
        await self._session.flush()
        return track
