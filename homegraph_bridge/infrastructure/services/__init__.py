"""
Services package - Infrastructure Layer

Health reporting and the live device state cache.
"""

from .device_state_cache import InMemoryDeviceStateCache
from .health_check_service import HealthCheckService

__all__ = ["HealthCheckService", "InMemoryDeviceStateCache"]
