"""ORM models; importing this package registers every table on Base.metadata."""

from app.models.audio_track import AudioCategory, AudioTrack
from app.models.chat_message import ChatMessage, ChatRole
from app.models.journal_entry import JournalEntry
from app.models.mood_entry import MoodEntry, MoodLevel
from app.models.user import User

__all__ = [
    "AudioCategory",
    "AudioTrack",
    "ChatMessage",
    "ChatRole",
    "JournalEntry",
    "MoodEntry",
    "MoodLevel",
    "User",
]
