from fastapi import APIRouter

from . import health, sensors

API_ROUTERS: tuple[APIRouter, ...] = (
    sensors.router,
    health.router,
)

__all__ = ["API_ROUTERS"]
