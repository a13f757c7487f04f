from fastapi import APIRouter, Depends, HTTPException, status

from sensor_cache.deps import get_sensor_store
from sensor_cache.errors import StorageError
from sensor_cache.services.sensor_store import SensorStore

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(store: SensorStore = Depends(get_sensor_store)):
    try:
        await store.ping()
    except StorageError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from None
    return {"status": "healthy"}
