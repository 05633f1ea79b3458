"""Audio catalog database model."""

from datetime import datetime
from enum import StrEnum

from sqlalchemy import DateTime, Enum, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


class AudioCategory(StrEnum):
    RELAXING = "relaxing"
    WORKOUT = "workout"


class AudioTrack(Base):
    """Playable audio session from the shared catalog."""

    __tablename__ = "audio_tracks"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    author: Mapped[str | None] = mapped_column(String(255), nullable=True)
    duration: Mapped[str] = mapped_column(String(20), nullable=False)
    category: Mapped[AudioCategory] = mapped_column(
        Enum(
            AudioCategory,
            name="audio_category",
            values_callable=lambda categories: [c.value for c in categories],
        ),
        nullable=False,
        index=True,
    )
    audio_url: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
