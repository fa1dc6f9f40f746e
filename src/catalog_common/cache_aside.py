"""CacheAsideService — shared read-through and invalidation paths.

Reads: check the cache, fall back to the repository on a miss, then populate
the key with a fixed TTL. Writes (in subclasses): commit to the database first,
then delete every key the write could have made stale, then return.

Known staleness window: nothing locks the exists/get/set sequence or the
commit/delete sequence. A read that misses before a concurrent write commits
can repopulate the pre-write snapshot after the write's invalidation. That
entry lives until its TTL expires or the next write on the same keys.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from config.settings import settings
from src.catalog_common.cache import CacheGatewayProtocol, CacheUnavailableError
from src.catalog_common.codec import CachePayloadError, CacheShape
from src.catalog_common.errors import (
    NotFoundError,
    RetrievalFailureError,
    WriteFailureError,
)
from src.catalog_common.outcome import Ok, Outcome

logger = logging.getLogger(__name__)

T = TypeVar("T")

# asyncpg raises connection errors (ConnectionRefusedError) unwrapped by SQLAlchemy
STORE_ERRORS = (SQLAlchemyError, OSError)


class CacheAsideService:
    entity: str = "entity"

    def __init__(
        self,
        cache: CacheGatewayProtocol,
        ttl_seconds: int | None = None,
        fail_open: bool | None = None,
    ) -> None:
        self._cache = cache
        self._ttl = settings.CACHE_TTL_SECONDS if ttl_seconds is None else ttl_seconds
        self._fail_open = settings.CACHE_FAIL_OPEN if fail_open is None else fail_open

    # ------------------------------------------------------------------
    # Read path
    # ------------------------------------------------------------------

    async def _read_through(
        self,
        key: str,
        shape: CacheShape[T],
        load: Callable[[], Awaitable[T | None]],
        entity_id: int | None = None,
    ) -> Outcome[T]:
        try:
            cached = await self._lookup(key, shape)
        except CacheUnavailableError as exc:
            if not self._fail_open:
                logger.error("Error to get %s from cache: %s", self.entity, exc)
                return RetrievalFailureError(self.entity, entity_id, exc)
            logger.warning("Cache read failed, falling through to DB: %s", exc)
            cached = None
        if cached is not None:
            logger.debug("Cache hit: %s", key)
            return Ok(cached)

        logger.debug("Cache miss: %s", key)
        try:
            value = await load()
        except STORE_ERRORS as exc:
            logger.error("Error to get %s: %s", self.entity, exc)
            return RetrievalFailureError(self.entity, entity_id, exc)
        if value is None:
            return NotFoundError(self.entity, entity_id)

        try:
            await self._cache.set_with_ttl(key, shape.encode(value), self._ttl)
        except CacheUnavailableError as exc:
            if not self._fail_open:
                logger.error("Error to cache %s: %s", self.entity, exc)
                return RetrievalFailureError(self.entity, entity_id, exc)
            logger.warning("Cache populate failed for %s: %s", key, exc)
        return Ok(value)

    async def _lookup(self, key: str, shape: CacheShape[T]) -> T | None:
        if not await self._cache.exists(key):
            return None
        raw = await self._cache.get(key)
        if raw is None:
            # Expired between exists() and get()
            return None
        try:
            return shape.decode(raw)
        except CachePayloadError as exc:
            logger.warning("Discarding cached %s: %s", key, exc)
            return None

    # ------------------------------------------------------------------
    # Write path
    # ------------------------------------------------------------------

    async def _write_failed(
        self,
        db: AsyncSession,
        action: str,
        entity_id: int | None,
        exc: SQLAlchemyError | OSError,
    ) -> WriteFailureError:
        await db.rollback()
        logger.error("Error %s %s: %s", action, self.entity, exc)
        return WriteFailureError(self.entity, entity_id, exc, action=action)

    async def _invalidate(
        self, action: str, entity_id: int | None, *keys: str
    ) -> WriteFailureError | None:
        """Delete every key the committed write made stale."""
        try:
            await self._cache.delete(*keys)
        except CacheUnavailableError as exc:
            if not self._fail_open:
                logger.error("Error invalidating %s cache: %s", self.entity, exc)
                return WriteFailureError(self.entity, entity_id, exc, action=action)
            logger.warning("Cache invalidation failed, keys may be stale until TTL: %s", exc)
            return None
        logger.debug("Invalidated: %s", ", ".join(keys))
        return None
