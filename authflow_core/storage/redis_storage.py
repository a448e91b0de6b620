"""
Redis Storage
=============
Redis-backed storage adapter using ``redis.asyncio``.
"""

from typing import Optional

import structlog
from redis.asyncio import Redis
from redis.exceptions import RedisError

from ..exceptions import StorageUnavailable
from .base import StorageAdapter

logger = structlog.get_logger(__name__)


class RedisStorage(StorageAdapter):
    """
    Redis-backed key-value store.

    Keys are namespaced so several apps can share one database.
    """

    def __init__(self, redis: Redis, namespace: str = "authflow"):
        """
        Args:
            redis: Async Redis client
            namespace: Prefix applied to every key
        """
        self.redis = redis
        self.namespace = namespace

    def _key(self, key: str) -> str:
        return f"{self.namespace}:{key}"

    async def get(self, key: str) -> Optional[str]:
        try:
            value = await self.redis.get(self._key(key))
        except RedisError as e:
            logger.error("Redis get failed", key=key, error=str(e))
            raise StorageUnavailable(f"Redis get failed: {e}", key=key, cause=e) from e
        if value is None:
            return None
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    async def set(self, key: str, value: str) -> None:
        try:
            await self.redis.set(self._key(key), value)
        except RedisError as e:
            logger.error("Redis set failed", key=key, error=str(e))
            raise StorageUnavailable(f"Redis set failed: {e}", key=key, cause=e) from e

    async def remove(self, key: str) -> None:
        try:
            await self.redis.delete(self._key(key))
        except RedisError as e:
            logger.error("Redis delete failed", key=key, error=str(e))
            raise StorageUnavailable(f"Redis delete failed: {e}", key=key, cause=e) from e
