"""
Repositories package - Infrastructure Layer

Implementations of the domain repository interfaces.
"""

from .device_repository import DeviceRepository

__all__ = ["DeviceRepository"]
