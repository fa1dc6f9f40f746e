"""Cache gateway — key/value store with per-key TTL.

Services depend on CacheGatewayProtocol; RedisCacheGateway is the production
implementation. Each call is atomic on its own; sequences of calls are not.
"""

from typing import Protocol

import redis.asyncio as aioredis
from redis.exceptions import RedisError


class CacheUnavailableError(Exception):
    """The cache backend could not complete a call."""

    def __init__(self, operation: str, key: str, cause: BaseException) -> None:
        self.operation = operation
        self.key = key
        self.cause = cause
        super().__init__(f"cache {operation} failed for {key!r}: {cause}")


class CacheGatewayProtocol(Protocol):
    async def exists(self, key: str) -> bool: ...

    async def get(self, key: str) -> str | None: ...

    async def set_with_ttl(self, key: str, value: str, ttl_seconds: int) -> None: ...

    async def delete(self, *keys: str) -> None: ...


class RedisCacheGateway:
    """Concrete gateway over redis.asyncio; wraps RedisError as CacheUnavailableError."""

    def __init__(self, redis: aioredis.Redis) -> None:
        self._redis = redis

    async def exists(self, key: str) -> bool:
        try:
            return bool(await self._redis.exists(key))
        except RedisError as exc:
            raise CacheUnavailableError("exists", key, exc) from exc

    async def get(self, key: str) -> str | None:
        try:
            value = await self._redis.get(key)
        except RedisError as exc:
            raise CacheUnavailableError("get", key, exc) from exc
        if isinstance(value, bytes):
            return value.decode()
        return value

    async def set_with_ttl(self, key: str, value: str, ttl_seconds: int) -> None:
        try:
            await self._redis.set(key, value, ex=ttl_seconds)
        except RedisError as exc:
            raise CacheUnavailableError("set", key, exc) from exc

    async def delete(self, *keys: str) -> None:
        if not keys:
            return
        try:
            await self._redis.delete(*keys)
        except RedisError as exc:
            raise CacheUnavailableError("delete", ",".join(keys), exc) from exc
