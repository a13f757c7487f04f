"""Test configuration and fixtures."""
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from redis.exceptions import ConnectionError as RedisConnectionError

from sensor_cache.deps import get_sensor_store
from sensor_cache.main import app
from sensor_cache.services.sensor_store import SensorStore


class InMemoryRedis:
    """Stands in for redis.asyncio.Redis with the few commands the store issues."""

    def __init__(self):
        self.data: dict[str, bytes] = {}
        self.calls: list[str] = []
        self.fail = False
        self.closed = False

    def _record(self, command: str) -> None:
        self.calls.append(command)
        if self.fail:
            raise RedisConnectionError("Error 111 connecting to localhost:6379. Connection refused.")

    async def ping(self) -> bool:
        self._record("PING")
        return True

    async def set(self, key: str, value: str) -> bool:
        self._record("SET")
        self.data[key] = value.encode("utf-8") if isinstance(value, str) else value
        return True

    async def get(self, key: str) -> bytes | None:
        self._record("GET")
        return self.data.get(key)

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def fake_redis() -> InMemoryRedis:
    return InMemoryRedis()


@pytest.fixture
def store(fake_redis: InMemoryRedis) -> SensorStore:
    return SensorStore(fake_redis)


@pytest_asyncio.fixture
async def client(store: SensorStore) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client wired to the in-memory store."""
    app.dependency_overrides[get_sensor_store] = lambda: store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def reading_payload() -> dict:
    return {
        "time": "2025-01-01T10:00:00Z",
        "device_id": "1234",
        "device_type": "A",
        "uptime": 123,
        "temp": 23.5,
    }
