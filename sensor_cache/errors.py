"""Error taxonomy for the sensor cache.

Every error is terminal for the request that raised it; routers decide which
HTTP status each one maps to.
"""


class SensorCacheError(Exception):
    """Base class for errors raised by the service."""


class BindError(SensorCacheError):
    """The request body could not be bound to a sensor reading."""


class ValidationError(SensorCacheError):
    """A bound reading carries a value the service does not accept."""


class NotFoundError(SensorCacheError):
    """No reading is stored for the requested device."""


class StorageError(SensorCacheError):
    """The key-value store could not be reached or rejected the command."""


class DeserializationError(SensorCacheError):
    """A stored value is not a valid sensor reading."""
