from __future__ import annotations

import logging

import pydantic
from redis.asyncio import Redis
from redis.exceptions import RedisError

from sensor_cache.core.config import Settings
from sensor_cache.errors import DeserializationError, NotFoundError, StorageError
from sensor_cache.schemas.reading import SensorReading

log = logging.getLogger("sensor-store")


class SensorStore:
    """Keeps the latest reading of every device under its device id.

    One instance wraps a single long-lived Redis client that is shared by all
    requests. Values are the JSON encoding of the reading and never expire.
    """

    def __init__(self, redis: Redis):
        self._redis = redis

    @classmethod
    def from_settings(cls, settings: Settings) -> SensorStore:
        redis = Redis(
            host=settings.redis_host,
            port=settings.redis_port,
            password=settings.redis_password or None,
            db=settings.redis_db,
        )
        return cls(redis)

    async def ping(self) -> None:
        try:
            await self._redis.ping()
        except RedisError as exc:
            raise StorageError(f"failed to connect to Redis: {exc}") from exc

    async def put(self, device_id: str, reading: SensorReading) -> None:
        payload = reading.model_dump_json()
        try:
            await self._redis.set(device_id, payload)
        except RedisError as exc:
            log.warning("Write for device %s failed: %s", device_id, exc)
            raise StorageError(
                f"fatal error on saving the device id {device_id} data in the cache: {exc}"
            ) from exc

    async def get(self, device_id: str) -> SensorReading:
        try:
            raw = await self._redis.get(device_id)
        except RedisError as exc:
            log.warning("Read for device %s failed: %s", device_id, exc)
            raise StorageError(
                f"fatal error on retrieving the sensor data for device id {device_id} from the cache: {exc}"
            ) from exc

        if raw is None:
            raise NotFoundError(f"sensor data for device id {device_id} not found")

        try:
            return SensorReading.model_validate_json(raw)
        except pydantic.ValidationError as exc:
            raise DeserializationError(
                f"fatal error on reading the sensor data for device id {device_id} from cache: {exc}"
            ) from exc

    async def close(self) -> None:
        await self._redis.aclose()
