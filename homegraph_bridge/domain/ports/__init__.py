"""Domain ports package."""

from .device_state import IDeviceStateProvider, IDeviceStateRegistry
from .device_store import DeviceDocument, IDeviceStore
from .health_check import IHealthCheckService

__all__ = [
    "DeviceDocument",
    "IDeviceStateProvider",
    "IDeviceStateRegistry",
    "IDeviceStore",
    "IHealthCheckService",
]
