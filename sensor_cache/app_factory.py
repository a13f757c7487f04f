import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from sensor_cache.core.config import Settings, get_settings
from sensor_cache.errors import BindError, StorageError
from sensor_cache.services.sensor_store import SensorStore

log = logging.getLogger("sensor-cache")


def _describe_bind_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts)


async def _bind_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = BindError(f"Unable to get sensor data from the request body: {_describe_bind_errors(exc)}")
    log.info("Bind failure on %s %s: %s", request.method, request.url.path, error)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(error)})


def create_base_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the FastAPI application with the store lifecycle and error handlers.
    The Redis connection is checked once at startup; an unreachable store aborts startup.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        store = SensorStore.from_settings(settings)
        try:
            await store.ping()
        except StorageError:
            log.error("Failed to initialize Redis client at %s", settings.redis_address)
            await store.close()
            raise
        log.info("Connected to Redis at %s", settings.redis_address)
        app.state.sensor_store = store
        try:
            yield
        finally:
            log.info("Closing Redis client")
            await store.close()

    app = FastAPI(title=settings.app_name, lifespan=_lifespan)
    app.add_exception_handler(RequestValidationError, _bind_error_handler)
    return app
