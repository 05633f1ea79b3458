"""Chat message database model."""

from datetime import datetime
from enum import StrEnum

from sqlalchemy import DateTime, Enum, ForeignKey, Index, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


class ChatRole(StrEnum):
    """Author of a conversation turn."""

    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(Base):
    """One turn of a user's conversation with the assistant."""

    __tablename__ = "chat_messages"
    __table_args__ = (
        Index("ix_chat_messages_user_id_created_at", "user_id", "created_at"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    role: Mapped[ChatRole] = mapped_column(
        Enum(
            ChatRole,
            name="chat_role",
            values_callable=lambda roles: [r.value for r in roles],
        ),
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
