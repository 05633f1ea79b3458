"""Conversation orchestration configuration."""

from typing import Literal

from pydantic import BaseModel, Field

SafetyThreshold = Literal[
    "BLOCK_NONE",
    "BLOCK_ONLY_HIGH",
    "BLOCK_MEDIUM_AND_ABOVE",
    "BLOCK_LOW_AND_ABOVE",
]

DEFAULT_SYSTEM_PROMPT = (
    "You are Moody, a compassionate and empathetic AI mental wellness "
    "companion built into the Moody app.\n\n"
    "Your role:\n"
    "- Provide warm, supportive, and non-judgmental emotional support\n"
    "- Help users reflect on their feelings and emotions\n"
    "- Suggest simple, evidence-based coping strategies (breathing exercises, "
    "mindfulness, journaling)\n"
    "- Celebrate positive moments and progress with the user\n"
    "- Gently encourage professional help if the user expresses serious distress\n\n"
    "Rules:\n"
    "- Stay focused on mental and emotional wellness only\n"
    "- Never diagnose medical or psychological conditions\n"
    "- Never give medical advice or prescribe medication\n"
    "- Keep responses concise, 2 to 4 sentences unless the user needs more\n"
    "- Use a warm, friendly tone, not overly clinical\n"
    "- Do not break character or discuss your underlying technology\n"
    "- If asked about topics unrelated to wellness, gently redirect the conversation"
)

DEFAULT_FALLBACK_REPLY = (
    "I'm here for you. Could you tell me a bit more about how you're feeling?"
)


class ChatConfig(BaseModel, frozen=True):
    """Settings handed to ChatService at construction."""

    context_window: int = Field(default=20, ge=0)
    history_limit: int = Field(default=50, ge=1)
    max_message_length: int = Field(default=2000, ge=1)
    llm_timeout_seconds: float = Field(default=30.0, gt=0)
    system_prompt: str = DEFAULT_SYSTEM_PROMPT
    fallback_reply: str = DEFAULT_FALLBACK_REPLY
    safety_threshold: SafetyThreshold = "BLOCK_MEDIUM_AND_ABOVE"
    send_rate_limit: str = "20/minute"
    send_lock_enabled: bool = True
    send_lock_ttl_seconds: int = Field(default=60, ge=1)
