"""Global dependencies for the application."""

from collections.abc import Callable
from functools import lru_cache
from typing import Any

from fastapi import Depends, Request
from langchain_anthropic import ChatAnthropic
from langchain_core.language_models import BaseChatModel
from langchain_google_genai import (
    ChatGoogleGenerativeAI,
    HarmBlockThreshold,
    HarmCategory,
)
from langchain_openai import ChatOpenAI
from pydantic import BaseModel, ConfigDict
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.database import get_async_session
from app.core.exceptions import AuthenticationError
from app.core.redis import get_redis
from app.repositories.audio_repo import AudioRepository
from app.repositories.chat_repo import ChatRepository
from app.repositories.journal_repo import JournalRepository
from app.repositories.mood_repo import MoodRepository
from app.repositories.user_repo import UserRepository
from app.services.audio_service import AudioService
from app.services.chat_lock_service import ChatSendLock
from app.services.chat_service import ChatService
from app.services.journal_service import JournalService
from app.services.mood_service import MoodService
from app.services.user_service import UserService

SAFETY_CATEGORIES = (
    HarmCategory.HARM_CATEGORY_HARASSMENT,
    HarmCategory.HARM_CATEGORY_HATE_SPEECH,
    HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT,
    HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT,
)


# --- LLM ---


def build_safety_settings(threshold: str) -> dict[Any, Any]:
    """Apply one block threshold uniformly across every harm category."""
    level = HarmBlockThreshold[threshold]
    return {category: level for category in SAFETY_CATEGORIES}


@lru_cache
def get_llm() -> BaseChatModel:
    """Get the LLM instance based on the configured provider.

    Retries are disabled: the chat flow makes exactly one attempt per send.
    """
    llm_config = settings.llm
    timeout = settings.chat.llm_timeout_seconds
    match llm_config.provider:
        case "gemini":
            return ChatGoogleGenerativeAI(
                model=llm_config.gemini_model,
                google_api_key=llm_config.gemini_api_key,
                safety_settings=build_safety_settings(settings.chat.safety_threshold),
                timeout=timeout,
                max_retries=0,
            )
        case "openai":
            return ChatOpenAI(
                model=llm_config.openai_model,
                api_key=llm_config.openai_api_key,
                timeout=timeout,
                max_retries=0,
            )
        case "anthropic":
            return ChatAnthropic(  # type: ignore[call-arg]
                model_name=llm_config.anthropic_model,
                api_key=llm_config.anthropic_api_key,
                timeout=timeout,
                max_retries=0,
            )
        case _:
            raise ValueError(f"Unsupported LLM provider: {llm_config.provider}")


# --- Auth dependencies ---


class CurrentUser(BaseModel):
    """Authenticated identity extracted from request state."""

    model_config = ConfigDict(frozen=True)

    external_id: str
    email: str | None = None
    name: str | None = None
    avatar_url: str | None = None


def get_current_user(request: Request) -> CurrentUser:
    """Extract the authenticated user from middleware-populated state."""
    state = getattr(request, "state", None)
    external_id = getattr(state, "external_id", None) if state else None
    if external_id is None:
        raise AuthenticationError(message="Not authenticated")
    metadata = getattr(state, "user_metadata", None) or {}
    return CurrentUser(
        external_id=external_id,
        email=getattr(state, "email", None),
        name=metadata.get("name") or metadata.get("full_name"),
        avatar_url=metadata.get("avatar_url"),
    )


# --- Repositories ---


def get_user_repository(
    session: AsyncSession = Depends(get_async_session),
) -> UserRepository:
    """Get UserRepository bound to the current session."""
    return UserRepository(session)


def get_chat_repository(
    session: AsyncSession = Depends(get_async_session),
) -> ChatRepository:
    """Get ChatRepository bound to the current session."""
    return ChatRepository(session)


def get_mood_repository(
    session: AsyncSession = Depends(get_async_session),
) -> MoodRepository:
    return MoodRepository(session)


def get_journal_repository(
    session: AsyncSession = Depends(get_async_session),
) -> JournalRepository:
    return JournalRepository(session)


def get_audio_repository(
    session: AsyncSession = Depends(get_async_session),
) -> AudioRepository:
    return AudioRepository(session)


# --- Services ---


def get_chat_send_lock() -> ChatSendLock | None:
    """Per-user send lock backed by the active Redis client, if enabled."""
    if not settings.chat.send_lock_enabled:
        return None
    return ChatSendLock(
        get_redis(),
        settings.redis,
        ttl_seconds=settings.chat.send_lock_ttl_seconds,
    )


def get_llm_factory() -> Callable[[], BaseChatModel]:
    """Deferred model construction; resolved only when a reply is generated."""
    return get_llm


def get_chat_service(
    session: AsyncSession = Depends(get_async_session),
    user_repo: UserRepository = Depends(get_user_repository),
    chat_repo: ChatRepository = Depends(get_chat_repository),
    llm_factory: Callable[[], BaseChatModel] = Depends(get_llm_factory),
    send_lock: ChatSendLock | None = Depends(get_chat_send_lock),
) -> ChatService:
    """Get ChatService wired to the configured model and chat settings."""
    return ChatService(
        llm_factory=llm_factory,
        user_repo=user_repo,
        chat_repo=chat_repo,
        session=session,
        config=settings.chat,
        send_lock=send_lock,
    )


def get_user_service(
    session: AsyncSession = Depends(get_async_session),
    user_repo: UserRepository = Depends(get_user_repository),
) -> UserService:
    return UserService(user_repo=user_repo, session=session)


def get_mood_service(
    session: AsyncSession = Depends(get_async_session),
    user_repo: UserRepository = Depends(get_user_repository),
    mood_repo: MoodRepository = Depends(get_mood_repository),
) -> MoodService:
    return MoodService(
        user_repo=user_repo,
        mood_repo=mood_repo,
        session=session,
        tz=settings.app.tzinfo,
    )


def get_journal_service(
    session: AsyncSession = Depends(get_async_session),
    user_repo: UserRepository = Depends(get_user_repository),
    journal_repo: JournalRepository = Depends(get_journal_repository),
) -> JournalService:
    return JournalService(
        user_repo=user_repo,
        journal_repo=journal_repo,
        session=session,
    )


def get_audio_service(
    audio_repo: AudioRepository = Depends(get_audio_repository),
) -> AudioService:
    return AudioService(audio_repo)
