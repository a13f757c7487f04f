import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from sensor_cache.deps import get_sensor_store
from sensor_cache.errors import SensorCacheError, StorageError, ValidationError
from sensor_cache.schemas.reading import SensorReading
from sensor_cache.services.sensor_store import SensorStore
from sensor_cache.services.validation import validate_reading

log = logging.getLogger("sensor-api")

router = APIRouter(tags=["sensors"])


@router.post("/process", status_code=status.HTTP_201_CREATED, response_class=Response)
async def save_sensor(
    reading: SensorReading,
    store: SensorStore = Depends(get_sensor_store),
):
    try:
        validate_reading(reading)
    except ValidationError as exc:
        log.info("Rejected reading from device %s: %s", reading.device_id, exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from None

    try:
        await store.put(reading.device_id, reading)
    except StorageError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error on saving sensor data in the cache: {exc}",
        ) from None

    return Response(status_code=status.HTTP_201_CREATED)


@router.get("/getDataById", response_model=SensorReading)
async def get_sensor(
    device_id: str = Query(default="", alias="id"),
    store: SensorStore = Depends(get_sensor_store),
):
    """Return the latest reading stored for a device."""
    if not device_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Device 'id' is missing")

    # Not-found and store failures share a status; the message tells them apart.
    try:
        return await store.get(device_id)
    except SensorCacheError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Couldn't get the Sensor data for device {device_id} from the cache. {exc}",
        ) from None
