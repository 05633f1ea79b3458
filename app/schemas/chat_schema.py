"""Chat request and response schemas."""

from datetime import datetime
from typing import Annotated

from pydantic import ConfigDict, StringConstraints

from app.models.chat_message import ChatRole
from app.schemas.response_schema import CamelModel

MAX_MESSAGE_LENGTH = 2000

MessageText = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True, min_length=1, max_length=MAX_MESSAGE_LENGTH
    ),
]


class SendMessageRequest(CamelModel):
    """Body of POST /chat/send."""

    message: MessageText


class ChatMessageResponse(CamelModel):
    """A persisted conversation turn as seen by the client."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: int
    content: str
    role: ChatRole
    created_at: datetime


class SendMessageResponse(CamelModel):
    """Both turns persisted by a successful send."""

    model_config = ConfigDict(frozen=True)

    user_message: ChatMessageResponse
    ai_reply: ChatMessageResponse
