"""Chat API router: conversation history and message sending."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from app.core.config import settings
from app.core.rate_limit import limiter
from app.dependencies import CurrentUser, get_chat_service, get_current_user
from app.schemas.chat_schema import (
    ChatMessageResponse,
    SendMessageRequest,
    SendMessageResponse,
)
from app.schemas.response_schema import ApiResponse, success_response
from app.services.chat_service import ChatService

router = APIRouter(prefix="/api/v1/chat", tags=["chat"])

ChatServiceDep = Annotated[ChatService, Depends(get_chat_service)]
CurrentUserDep = Annotated[CurrentUser, Depends(get_current_user)]


@router.get("/history", response_model=ApiResponse[list[ChatMessageResponse]])
async def get_history(
    chat_service: ChatServiceDep,
    current_user: CurrentUserDep,
) -> dict:
    """Return the caller's most recent turns, oldest first."""
    result = await chat_service.get_history(current_user.external_id)
    return success_response(result)


@router.post("/send", response_model=ApiResponse[SendMessageResponse])
@limiter.limit(settings.chat.send_rate_limit)
async def send_message(
    request: Request,
    body: SendMessageRequest,
    chat_service: ChatServiceDep,
    current_user: CurrentUserDep,
) -> dict:
    """Send a message and receive the assistant's reply."""
    result = await chat_service.send_message(current_user.external_id, body.message)
    return success_response(result)
