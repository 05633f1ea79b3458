"""Redis connection configuration."""

from pydantic import BaseModel


class RedisConfig(BaseModel, frozen=True):
    """Redis connection settings."""

    url: str
    key_prefix: str = "moody:"

    def key(self, *parts: str | int) -> str:
        """Build a namespaced key, e.g. ``moody:chat_send_lock:42``."""
        return self.key_prefix + ":".join(str(p) for p in parts)
