"""Chat repository: the per-user, append-only conversation log."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.chat_message import ChatMessage, ChatRole


class ChatRepository:
    """Encapsulates chat message database queries."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def append(self, user_id: int, role: ChatRole, content: str) -> ChatMessage:
        """Insert one turn; id and created_at are generated by the database."""
        message = ChatMessage(user_id=user_id, role=role, content=content)
        self._session.add(message)
        await self._session.flush()
        await self._session.refresh(message)
        return message

    async def recent(self, user_id: int, limit: int) -> list[ChatMessage]:
        """Return the latest ``limit`` turns for a user, oldest first.

        Rows are fetched newest first (created_at DESC, id DESC) so the
        LIMIT keeps the most recent ones, then reversed for the caller.
        """
        if limit <= 0:
            return []
        result = await self._session.execute(
            select(ChatMessage)
            .where(ChatMessage.user_id == user_id)
            .order_by(ChatMessage.created_at.desc(), ChatMessage.id.desc())
            .limit(limit)
        )
        rows = list(result.scalars().all())
        rows.reverse()
        return rows
