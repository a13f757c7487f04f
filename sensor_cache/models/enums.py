from enum import Enum


class DeviceType(str, Enum):
    A = "A"
    B = "B"
