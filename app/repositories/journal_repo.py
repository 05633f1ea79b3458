"""Journal entry repository."""

from sqlalchemy import and_, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.journal_entry import JournalEntry


class JournalRepository:
    """Encapsulates journal entry database queries."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, user_id: int, title: str, content: str) -> JournalEntry:
        """Create a journal entry."""
        entry = JournalEntry(user_id=user_id, title=title, content=content)
        self._session.add(entry)
        await self._session.flush()
        await self._session.refresh(entry)
        return entry

    async def find_by_user(self, user_id: int) -> list[JournalEntry]:
        """All entries for a user, newest first."""
        result = await self._session.execute(
            select(JournalEntry)
            .where(JournalEntry.user_id == user_id)
            .order_by(JournalEntry.created_at.desc(), JournalEntry.id.desc())
        )
        return list(result.scalars().all())

    async def find_owned(self, user_id: int, entry_id: int) -> JournalEntry | None:
        """Find an entry only if it belongs to ``user_id``."""
        result = await self._session.execute(
            select(JournalEntry).where(
                and_(JournalEntry.id == entry_id, JournalEntry.user_id == user_id)
            )
        )
        return result.scalar_one_or_none()

    async def update(
        self,
        entry: JournalEntry,
        title: str | None = None,
        content: str | None = None,
    ) -> JournalEntry:
        """Apply a partial update; updated_at is refreshed by the database."""
        if title is not None:
            entry.title = title
        if content is not None:
            entry.content = content
        self._session.add(entry)
        await self._session.flush()
        await self._session.refresh(entry)
        return entry

    async def delete(self, entry_id: int) -> None:
        """Hard-delete an entry by primary key."""
        await self._session.execute(
            delete(JournalEntry).where(JournalEntry.id == entry_id)
        )
