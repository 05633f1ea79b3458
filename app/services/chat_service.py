"""Conversation orchestration: persist, window, ask the model, persist."""

import asyncio
from collections.abc import Callable
from typing import Any

import structlog
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import AIServiceUnavailableError, InvalidMessageError
from app.core.settings import ChatConfig
from app.models.chat_message import ChatMessage, ChatRole
from app.repositories.chat_repo import ChatRepository
from app.repositories.user_repo import UserRepository
from app.schemas.chat_schema import ChatMessageResponse, SendMessageResponse
from app.services.chat_lock_service import ChatSendLock
from app.services.user_service import resolve_user

logger = structlog.get_logger()


def to_langchain_message(message: ChatMessage) -> BaseMessage:
    """Translate a stored turn into the model's message vocabulary."""
    match message.role:
        case ChatRole.USER:
            return HumanMessage(content=message.content)
        case ChatRole.ASSISTANT:
            return AIMessage(content=message.content)
        case _:
            raise ValueError(f"Unsupported chat role: {message.role}")


def build_prompt(
    system_prompt: str, history: list[ChatMessage], text: str
) -> list[BaseMessage]:
    """System preamble, prior turns oldest first, then the new user text."""
    return [
        SystemMessage(content=system_prompt),
        *(to_langchain_message(m) for m in history),
        HumanMessage(content=text),
    ]


def extract_text(content: Any) -> str:
    """Flatten string or content-block model output into plain text."""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts: list[str] = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(str(block.get("text", "")))
        return "".join(parts)
    return ""


class ChatService:
    """Turns one user message into a persisted, context-aware reply.

    The user turn is committed before the model is called, so it survives
    a model failure. The assistant turn is a second, independent commit.
    The model client is built lazily; history reads never touch it.
    """

    def __init__(
        self,
        llm_factory: Callable[[], BaseChatModel],
        user_repo: UserRepository,
        chat_repo: ChatRepository,
        session: AsyncSession,
        config: ChatConfig,
        send_lock: ChatSendLock | None = None,
    ) -> None:
        self._llm_factory = llm_factory
        self._user_repo = user_repo
        self._chat_repo = chat_repo
        self._session = session
        self._config = config
        self._send_lock = send_lock

    async def get_history(self, external_id: str) -> list[ChatMessageResponse]:
        """Most recent turns for the caller, oldest first."""
        user = await resolve_user(self._user_repo, external_id)
        messages = await self._chat_repo.recent(user.id, self._config.history_limit)
        return [ChatMessageResponse.model_validate(m) for m in messages]

    async def send_message(
        self, external_id: str, raw_text: str
    ) -> SendMessageResponse:
        """Persist the user turn, ask the model, persist and return both turns."""
        user = await resolve_user(self._user_repo, external_id)
        text = self._validate(raw_text)

        if self._send_lock is None:
            return await self._exchange(user.id, text)
        async with self._send_lock.hold(user.id):
            return await self._exchange(user.id, text)

    def _validate(self, raw_text: str) -> str:
        text = raw_text.strip()
        if not text:
            raise InvalidMessageError("Message cannot be empty")
        limit = self._config.max_message_length
        if len(text) > limit:
            raise InvalidMessageError(f"Message cannot exceed {limit} characters")
        return text

    async def _exchange(self, user_id: int, text: str) -> SendMessageResponse:
        user_turn = await self._chat_repo.append(user_id, ChatRole.USER, text)
        await self._session.commit()
        logger.info("User turn stored", user_id=user_id, message_id=user_turn.id)

        window = self._config.context_window
        recent = await self._chat_repo.recent(user_id, window + 1)
        prior = [m for m in recent if m.id != user_turn.id]
        prior = prior[-window:] if window else []

        reply = await self._generate_reply(user_id, prior, text)

        ai_turn = await self._chat_repo.append(user_id, ChatRole.ASSISTANT, reply)
        await self._session.commit()
        logger.info(
            "Assistant turn stored",
            user_id=user_id,
            message_id=ai_turn.id,
            context_turns=len(prior),
        )

        return SendMessageResponse(
            user_message=ChatMessageResponse.model_validate(user_turn),
            ai_reply=ChatMessageResponse.model_validate(ai_turn),
        )

    async def _generate_reply(
        self, user_id: int, prior: list[ChatMessage], text: str
    ) -> str:
        """Single model call; setup errors, failures and timeouts become a 503."""
        messages = build_prompt(self._config.system_prompt, prior, text)
        try:
            llm = self._llm_factory()
            response = await asyncio.wait_for(
                llm.ainvoke(messages),
                timeout=self._config.llm_timeout_seconds,
            )
            reply = extract_text(response.content).strip()
        except Exception as exc:
            logger.exception("Language model call failed", user_id=user_id)
            raise AIServiceUnavailableError from exc

        if not reply:
            logger.warning("Language model returned an empty reply", user_id=user_id)
            return self._config.fallback_reply
        return reply
