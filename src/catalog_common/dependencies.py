"""FastAPI dependencies shared by the catalog routers."""

from typing import Annotated

import redis.asyncio as aioredis
from fastapi import Depends

from src.catalog_common.cache import CacheGatewayProtocol, RedisCacheGateway
from src.catalog_common.redis_client import get_redis


async def get_cache_gateway(
    redis: Annotated[aioredis.Redis, Depends(get_redis)],
) -> CacheGatewayProtocol:
    return RedisCacheGateway(redis)
