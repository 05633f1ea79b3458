"""Redis-backed per-user lock around chat sends."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import redis.asyncio as redis
import structlog
from redis.asyncio.lock import Lock
from redis.exceptions import LockError

from app.core.exceptions import ChatSendInProgressError
from app.core.settings import RedisConfig

logger = structlog.get_logger()

LOCK_NAMESPACE = "chat_send_lock"


class ChatSendLock:
    """Allow at most one in-flight send per user.

    The key expires after ``ttl_seconds`` so a crashed worker cannot wedge
    a user's conversation. Release only deletes the key while it still holds
    this request's token.
    """

    def __init__(
        self,
        redis_client: redis.Redis,  # type: ignore[type-arg]
        redis_config: RedisConfig,
        ttl_seconds: int,
    ) -> None:
        self._redis = redis_client
        self._config = redis_config
        self._ttl = ttl_seconds

    def _key(self, user_id: int) -> str:
        return self._config.key(LOCK_NAMESPACE, user_id)

    async def acquire(self, user_id: int) -> Lock | None:
        """Try to take the lock without waiting; None if another send holds it."""
        lock = self._redis.lock(
            self._key(user_id),
            timeout=self._ttl,
            blocking=False,
            thread_local=False,
        )
        acquired = await lock.acquire()
        return lock if acquired else None

    async def release(self, user_id: int, lock: Lock) -> None:
        """Release the lock if this request still owns it."""
        try:
            await lock.release()
        except LockError:
            logger.warning("Chat send lock expired before release", user_id=user_id)

    @asynccontextmanager
    async def hold(self, user_id: int) -> AsyncIterator[None]:
        """Hold the lock for the duration of the block or raise 409."""
        lock = await self.acquire(user_id)
        if lock is None:
            logger.info("Concurrent chat send rejected", user_id=user_id)
            raise ChatSendInProgressError
        try:
            yield
        finally:
            await self.release(user_id, lock)
