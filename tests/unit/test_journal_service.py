"""Unit tests for JournalService."""

from datetime import UTC, datetime

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import JournalEntryNotFoundError
from app.models.journal_entry import JournalEntry
from app.models.user import User
from app.repositories.journal_repo import JournalRepository
from app.repositories.user_repo import UserRepository
from app.schemas.journal_schema import CreateJournalRequest, UpdateJournalRequest
from app.services.journal_service import JournalService


@pytest.fixture
def journal_service(db_session: AsyncSession) -> JournalService:
    return JournalService(
        user_repo=UserRepository(db_session),
        journal_repo=JournalRepository(db_session),
        session=db_session,
    )


@pytest.fixture
async def stranger(db_session: AsyncSession) -> User:
    user = await UserRepository(db_session).create(
        external_id="stranger-subject", email="stranger@test.com"
    )
    await db_session.commit()
    return user


class TestJournalService:
    """CRUD with ownership checks."""

    @pytest.mark.asyncio
    async def test_create_and_get(
        self, journal_service: JournalService, user: User
    ) -> None:
        created = await journal_service.create(
            user.external_id, CreateJournalRequest(title="Monday", content="Calm")
        )
        fetched = await journal_service.get(user.external_id, created.id)
        assert fetched.title == "Monday"
        assert fetched.content == "Calm"

    @pytest.mark.asyncio
    async def test_list_newest_first(
        self,
        journal_service: JournalService,
        db_session: AsyncSession,
        user: User,
    ) -> None:
        for day in (1, 3, 2):
            db_session.add(
                JournalEntry(
                    user_id=user.id,
                    title=f"Day {day}",
                    content="...",
                    created_at=datetime(2025, 3, day, tzinfo=UTC),
                )
            )
        await db_session.commit()

        entries = await journal_service.list_entries(user.external_id)
        assert [e.title for e in entries] == ["Day 3", "Day 2", "Day 1"]

    @pytest.mark.asyncio
    async def test_partial_update(
        self, journal_service: JournalService, user: User
    ) -> None:
        created = await journal_service.create(
            user.external_id, CreateJournalRequest(title="Draft", content="Body")
        )

        updated = await journal_service.update(
            user.external_id, created.id, UpdateJournalRequest(title="Final")
        )

        assert updated.title == "Final"
        assert updated.content == "Body"

    @pytest.mark.asyncio
    async def test_delete(self, journal_service: JournalService, user: User) -> None:
        created = await journal_service.create(
            user.external_id, CreateJournalRequest(title="Gone", content="Soon")
        )

        await journal_service.delete(user.external_id, created.id)

        with pytest.raises(JournalEntryNotFoundError):
            await journal_service.get(user.external_id, created.id)

    @pytest.mark.asyncio
    async def test_other_users_entry_is_not_found(
        self, journal_service: JournalService, user: User, stranger: User
    ) -> None:
        created = await journal_service.create(
            user.external_id, CreateJournalRequest(title="Private", content="Mine")
        )

        with pytest.raises(JournalEntryNotFoundError):
            await journal_service.get(stranger.external_id, created.id)
        with pytest.raises(JournalEntryNotFoundError):
            await journal_service.update(
                stranger.external_id, created.id, UpdateJournalRequest(title="x")
            )
        with pytest.raises(JournalEntryNotFoundError):
            await journal_service.delete(stranger.external_id, created.id)
