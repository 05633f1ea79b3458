"""Mood entry database model."""

from datetime import datetime
from enum import StrEnum

from sqlalchemy import DateTime, Enum, ForeignKey, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


class MoodLevel(StrEnum):
    AWFUL = "awful"
    BAD = "bad"
    OKAY = "okay"
    GOOD = "good"
    GREAT = "great"


class MoodEntry(Base):
    """A single mood check-in."""

    __tablename__ = "mood_entries"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    mood: Mapped[MoodLevel] = mapped_column(
        Enum(
            MoodLevel,
            name="mood_level",
            values_callable=lambda levels: [m.value for m in levels],
        ),
        nullable=False,
    )
    note: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
