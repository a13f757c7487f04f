from sensor_cache.errors import ValidationError
from sensor_cache.models.enums import DeviceType
from sensor_cache.schemas.reading import SensorReading

SUPPORTED_DEVICE_TYPES = frozenset(member.value for member in DeviceType)


def validate_reading(reading: SensorReading) -> None:
    if reading.device_type not in SUPPORTED_DEVICE_TYPES:
        raise ValidationError(f"device type {reading.device_type} is not supported")
