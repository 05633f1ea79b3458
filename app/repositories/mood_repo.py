"""Mood entry repository."""

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.mood_entry import MoodEntry, MoodLevel


class MoodRepository:
    """Encapsulates mood entry database queries."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(
        self, user_id: int, mood: MoodLevel, note: str | None = None
    ) -> MoodEntry:
        """Create a mood entry."""
        entry = MoodEntry(user_id=user_id, mood=mood, note=note)
        self._session.add(entry)
        await self._session.flush()
        await self._session.refresh(entry)
        return entry

    async def find_since(self, user_id: int, since: datetime) -> list[MoodEntry]:
        """Entries created at or after ``since``, oldest first."""
        result = await self._session.execute(
            select(MoodEntry)
            .where(MoodEntry.user_id == user_id, MoodEntry.created_at >= since)
            .order_by(MoodEntry.created_at.asc(), MoodEntry.id.asc())
        )
        return list(result.scalars().all())
