"""Mood logging and statistics schemas."""

from datetime import datetime

from pydantic import ConfigDict, Field

from app.models.mood_entry import MoodLevel
from app.schemas.response_schema import CamelModel


class CreateMoodRequest(CamelModel):
    """Body of POST /mood."""

    mood: MoodLevel
    note: str | None = Field(default=None, max_length=500)


class MoodEntryResponse(CamelModel):
    """A stored mood entry."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: int
    mood: MoodLevel
    note: str | None = None
    created_at: datetime


class WeeklyMoodDay(CamelModel):
    """Score of one calendar day; None when nothing was logged."""

    model_config = ConfigDict(frozen=True)

    day: str
    score: int | None = None


class MoodBreakdownItem(CamelModel):
    """Share of a single mood level over the stats window."""

    model_config = ConfigDict(frozen=True)

    mood: MoodLevel
    label: str
    percentage: int
    color: str


class MoodStatsResponse(CamelModel):
    """Emotion breakdown for the last 30 days."""

    model_config = ConfigDict(frozen=True)

    total: int
    breakdown: list[MoodBreakdownItem] = Field(default_factory=list)
