from . import health, sensors

__all__ = [
    "health",
    "sensors",
]
