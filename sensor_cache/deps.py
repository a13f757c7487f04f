from fastapi import Request

from sensor_cache.services.sensor_store import SensorStore


def get_sensor_store(request: Request) -> SensorStore:
    return request.app.state.sensor_store
