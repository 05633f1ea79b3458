"""Unit tests for mood aggregation."""

from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import UserNotFoundError
from app.models.mood_entry import MoodEntry, MoodLevel
from app.models.user import User
from app.repositories.mood_repo import MoodRepository
from app.repositories.user_repo import UserRepository
from app.schemas.mood_schema import CreateMoodRequest
from app.services.mood_service import (
    MoodService,
    mood_breakdown,
    round_half_up,
    weekly_scores,
)

UTC_ZONE = ZoneInfo("UTC")
# Friday
NOW = datetime(2025, 3, 7, 12, 0, tzinfo=UTC)


def _utc(*parts: int) -> datetime:
    return datetime(*parts, tzinfo=UTC)


def _service(db_session: AsyncSession, tz: ZoneInfo = UTC_ZONE) -> MoodService:
    return MoodService(
        user_repo=UserRepository(db_session),
        mood_repo=MoodRepository(db_session),
        session=db_session,
        tz=tz,
    )


async def _log(
    db_session: AsyncSession, user_id: int, mood: MoodLevel, created_at: datetime
) -> None:
    db_session.add(MoodEntry(user_id=user_id, mood=mood, created_at=created_at))
    await db_session.flush()


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        ("value", "expected"), [(12.5, 13), (33.333, 33), (66.667, 67), (50.0, 50)]
    )
    def test_rounding(self, value: float, expected: int) -> None:
        assert round_half_up(value) == expected


class TestWeeklyScores:
    def test_no_entries(self) -> None:
        days = weekly_scores([], date(2025, 3, 7), UTC_ZONE)
        assert [d.day for d in days] == [
            "Sat", "Sun", "Mon", "Tue", "Wed", "Thu", "Fri"
        ]
        assert all(d.score is None for d in days)


class TestMoodBreakdown:
    def test_empty(self) -> None:
        stats = mood_breakdown([])
        assert stats.total == 0
        assert stats.breakdown == []

    def test_percentages_and_order(self) -> None:
        entries = [
            MoodEntry(mood=MoodLevel.BAD),
            MoodEntry(mood=MoodLevel.GREAT),
            MoodEntry(mood=MoodLevel.GOOD),
            MoodEntry(mood=MoodLevel.GREAT),
        ]

        stats = mood_breakdown(entries)

        assert stats.total == 4
        assert [(i.mood, i.percentage) for i in stats.breakdown] == [
            (MoodLevel.GREAT, 50),
            (MoodLevel.GOOD, 25),
            (MoodLevel.BAD, 25),
        ]
        assert stats.breakdown[0].label == "Great"
        assert stats.breakdown[2].label == "Sad"
        assert stats.breakdown[0].color == "#F07033"

    def test_thirds_round_half_up(self) -> None:
        entries = [
            MoodEntry(mood=MoodLevel.OKAY),
            MoodEntry(mood=MoodLevel.OKAY),
            MoodEntry(mood=MoodLevel.AWFUL),
        ]
        stats = mood_breakdown(entries)
        assert [(i.label, i.percentage) for i in stats.breakdown] == [
            ("Calm", 67),
            ("Awful", 33),
        ]


class TestMoodService:
    """MoodService against the test database."""

    @pytest.mark.asyncio
    async def test_create(self, db_session: AsyncSession, user: User) -> None:
        entry = await _service(db_session).create(
            user.external_id, CreateMoodRequest(mood=MoodLevel.GOOD, note="walk")
        )
        assert entry.id is not None
        assert entry.mood == MoodLevel.GOOD
        assert entry.note == "walk"

    @pytest.mark.asyncio
    async def test_create_unknown_user(self, db_session: AsyncSession) -> None:
        with pytest.raises(UserNotFoundError):
            await _service(db_session).create(
                "nobody", CreateMoodRequest(mood=MoodLevel.GOOD)
            )

    @pytest.mark.asyncio
    async def test_weekly_uses_latest_entry_per_day(
        self, db_session: AsyncSession, user: User
    ) -> None:
        await _log(db_session, user.id, MoodLevel.AWFUL, _utc(2025, 2, 28, 9))
        await _log(db_session, user.id, MoodLevel.BAD, _utc(2025, 3, 1, 10))
        await _log(db_session, user.id, MoodLevel.GREAT, _utc(2025, 3, 1, 20))
        await _log(db_session, user.id, MoodLevel.GOOD, _utc(2025, 3, 5, 8))

        days = await _service(db_session).weekly(user.external_id, now=NOW)

        assert [d.score for d in days] == [5, None, None, None, 4, None, None]
        assert days[-1].day == "Fri"

    @pytest.mark.asyncio
    async def test_weekly_buckets_in_configured_timezone(
        self, db_session: AsyncSession, user: User
    ) -> None:
        seoul = ZoneInfo("Asia/Seoul")
        # 20:00 UTC on the 6th is already the 7th in Seoul
        await _log(db_session, user.id, MoodLevel.OKAY, _utc(2025, 3, 6, 20))

        days = await _service(db_session, tz=seoul).weekly(
            user.external_id, now=datetime(2025, 3, 7, 3, tzinfo=UTC)
        )

        assert days[-1].score == 3
        assert days[-2].score is None

    @pytest.mark.asyncio
    async def test_stats_window_is_thirty_days(
        self, db_session: AsyncSession, user: User
    ) -> None:
        await _log(db_session, user.id, MoodLevel.AWFUL, _utc(2025, 1, 1))
        await _log(db_session, user.id, MoodLevel.GOOD, _utc(2025, 3, 1))
        await _log(db_session, user.id, MoodLevel.GREAT, _utc(2025, 3, 6))

        stats = await _service(db_session).stats(user.external_id, now=NOW)

        assert stats.total == 2
        assert {i.mood for i in stats.breakdown} == {MoodLevel.GOOD, MoodLevel.GREAT}
