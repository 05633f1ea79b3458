"""Mood logging and weekly/monthly aggregation."""

import math
from collections import Counter
from datetime import UTC, date, datetime, time, timedelta
from zoneinfo import ZoneInfo

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.mood_entry import MoodEntry, MoodLevel
from app.repositories.mood_repo import MoodRepository
from app.repositories.user_repo import UserRepository
from app.schemas.mood_schema import (
    CreateMoodRequest,
    MoodBreakdownItem,
    MoodEntryResponse,
    MoodStatsResponse,
    WeeklyMoodDay,
)
from app.services.user_service import resolve_user

WEEK_DAYS = 7
STATS_WINDOW_DAYS = 30

MOOD_SCORE: dict[MoodLevel, int] = {
    MoodLevel.AWFUL: 1,
    MoodLevel.BAD: 2,
    MoodLevel.OKAY: 3,
    MoodLevel.GOOD: 4,
    MoodLevel.GREAT: 5,
}

MOOD_LABEL: dict[MoodLevel, str] = {
    MoodLevel.AWFUL: "Awful",
    MoodLevel.BAD: "Sad",
    MoodLevel.OKAY: "Calm",
    MoodLevel.GOOD: "Happy",
    MoodLevel.GREAT: "Great",
}

MOOD_COLOR: dict[MoodLevel, str] = {
    MoodLevel.GREAT: "#F07033",
    MoodLevel.GOOD: "#F8A775",
    MoodLevel.OKAY: "#9E9E9E",
    MoodLevel.BAD: "#64B5F6",
    MoodLevel.AWFUL: "#EF5350",
}

# Tie order for equal percentages.
BREAKDOWN_ORDER = [
    MoodLevel.GREAT,
    MoodLevel.GOOD,
    MoodLevel.OKAY,
    MoodLevel.BAD,
    MoodLevel.AWFUL,
]


def _as_aware(value: datetime) -> datetime:
    # SQLite hands back naive timestamps; they are stored in UTC.
    return value if value.tzinfo else value.replace(tzinfo=UTC)


def _start_of_day(day: date, tz: ZoneInfo) -> datetime:
    return datetime.combine(day, time.min, tzinfo=tz)


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def weekly_scores(
    entries: list[MoodEntry], today: date, tz: ZoneInfo
) -> list[WeeklyMoodDay]:
    """Seven days ending today; each day takes its latest entry's score."""
    latest: dict[date, MoodEntry] = {}
    for entry in entries:
        local_day = _as_aware(entry.created_at).astimezone(tz).date()
        latest[local_day] = entry  # entries arrive oldest first

    days: list[WeeklyMoodDay] = []
    for offset in range(WEEK_DAYS - 1, -1, -1):
        day = today - timedelta(days=offset)
        match = latest.get(day)
        days.append(
            WeeklyMoodDay(
                day=day.strftime("%a"),
                score=MOOD_SCORE[match.mood] if match else None,
            )
        )
    return days


def mood_breakdown(entries: list[MoodEntry]) -> MoodStatsResponse:
    """Percentage per mood level, most frequent first."""
    total = len(entries)
    if total == 0:
        return MoodStatsResponse(total=0, breakdown=[])

    counts = Counter(entry.mood for entry in entries)
    items = [
        MoodBreakdownItem(
            mood=mood,
            label=MOOD_LABEL[mood],
            percentage=round_half_up(counts[mood] / total * 100),
            color=MOOD_COLOR[mood],
        )
        for mood in BREAKDOWN_ORDER
        if counts[mood] > 0
    ]
    items.sort(key=lambda item: item.percentage, reverse=True)
    return MoodStatsResponse(total=total, breakdown=items)


class MoodService:
    """Mood entries and statistics for the authenticated user."""

    def __init__(
        self,
        user_repo: UserRepository,
        mood_repo: MoodRepository,
        session: AsyncSession,
        tz: ZoneInfo,
    ) -> None:
        self._user_repo = user_repo
        self._mood_repo = mood_repo
        self._session = session
        self._tz = tz

    async def create(
        self, external_id: str, request: CreateMoodRequest
    ) -> MoodEntryResponse:
        user = await resolve_user(self._user_repo, external_id)
        entry = await self._mood_repo.create(user.id, request.mood, request.note)
        await self._session.commit()
        return MoodEntryResponse.model_validate(entry)

    async def weekly(
        self, external_id: str, now: datetime | None = None
    ) -> list[WeeklyMoodDay]:
        user = await resolve_user(self._user_repo, external_id)
        today = (now or datetime.now(UTC)).astimezone(self._tz).date()
        since = _start_of_day(today - timedelta(days=WEEK_DAYS - 1), self._tz)
        entries = await self._mood_repo.find_since(user.id, since.astimezone(UTC))
        return weekly_scores(entries, today, self._tz)

    async def stats(
        self, external_id: str, now: datetime | None = None
    ) -> MoodStatsResponse:
        user = await resolve_user(self._user_repo, external_id)
        since = (now or datetime.now(UTC)) - timedelta(days=STATS_WINDOW_DAYS)
        entries = await self._mood_repo.find_since(user.id, since.astimezone(UTC))
        return mood_breakdown(entries)
