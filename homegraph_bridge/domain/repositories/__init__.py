"""
Repositories Package

Contracts for the device catalog. The implementation lives in the
infrastructure layer.
"""

from .device_repository import IDeviceRepository

__all__ = ["IDeviceRepository"]
