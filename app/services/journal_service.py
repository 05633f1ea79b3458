"""Journal entry CRUD with ownership enforcement."""

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import JournalEntryNotFoundError
from app.models.journal_entry import JournalEntry
from app.repositories.journal_repo import JournalRepository
from app.repositories.user_repo import UserRepository
from app.schemas.journal_schema import (
    CreateJournalRequest,
    JournalEntryResponse,
    UpdateJournalRequest,
)
from app.services.user_service import resolve_user


class JournalService:
    """Journal operations scoped to the authenticated user."""

    def __init__(
        self,
        user_repo: UserRepository,
        journal_repo: JournalRepository,
        session: AsyncSession,
    ) -> None:
        self._user_repo = user_repo
        self._journal_repo = journal_repo
        self._session = session

    async def create(
        self, external_id: str, request: CreateJournalRequest
    ) -> JournalEntryResponse:
        user = await resolve_user(self._user_repo, external_id)
        entry = await self._journal_repo.create(user.id, request.title, request.content)
        await self._session.commit()
        return JournalEntryResponse.model_validate(entry)

    async def list_entries(self, external_id: str) -> list[JournalEntryResponse]:
        user = await resolve_user(self._user_repo, external_id)
        entries = await self._journal_repo.find_by_user(user.id)
        return [JournalEntryResponse.model_validate(e) for e in entries]

    async def get(self, external_id: str, entry_id: int) -> JournalEntryResponse:
        entry = await self._find_owned(external_id, entry_id)
        return JournalEntryResponse.model_validate(entry)

    async def update(
        self, external_id: str, entry_id: int, request: UpdateJournalRequest
    ) -> JournalEntryResponse:
        entry = await self._find_owned(external_id, entry_id)
        entry = await self._journal_repo.update(
            entry, title=request.title, content=request.content
        )
        await self._session.commit()
        return JournalEntryResponse.model_validate(entry)

    async def delete(self, external_id: str, entry_id: int) -> None:
        entry = await self._find_owned(external_id, entry_id)
        await self._journal_repo.delete(entry.id)
        await self._session.commit()

    async def _find_owned(self, external_id: str, entry_id: int) -> JournalEntry:
        """Entries of other users are indistinguishable from missing ones."""
        user = await resolve_user(self._user_repo, external_id)
        entry = await self._journal_repo.find_owned(user.id, entry_id)
        if entry is None:
            raise JournalEntryNotFoundError
        return entry
