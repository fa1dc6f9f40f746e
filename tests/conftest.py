"""Shared test fixtures."""

from unittest.mock import AsyncMock, MagicMock

import fakeredis
import pytest
from httpx import ASGITransport, AsyncClient

from src.catalog_common.cache import RedisCacheGateway
from src.main import app


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client for testing FastAPI endpoints."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def fake_redis() -> fakeredis.FakeAsyncRedis:
    """Isolated in-memory Redis per test."""
    return fakeredis.FakeAsyncRedis(server=fakeredis.FakeServer(), decode_responses=True)


@pytest.fixture
def cache(fake_redis: fakeredis.FakeAsyncRedis) -> RedisCacheGateway:
    return RedisCacheGateway(fake_redis)


@pytest.fixture
def db() -> MagicMock:
    """AsyncSession stand-in: repositories are mocked, only commit/rollback are awaited."""
    session = MagicMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    return session
