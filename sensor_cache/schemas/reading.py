from pydantic import BaseModel, ConfigDict


class SensorReading(BaseModel):
    """A single reading reported by a device.

    ``device_type`` is kept as a plain string so that unsupported types reach
    the validation step instead of failing the bind.
    """

    model_config = ConfigDict(strict=True, extra="ignore")

    time: str
    device_id: str
    device_type: str
    uptime: int
    temp: float
