"""
Stores Package - Infrastructure Layer

Durable backends for the device catalog and the document mapping they
share.
"""

from .device_document import to_document, to_entity
from .json_file_device_store import JsonFileDeviceStore
from .mongo_device_store import MongoDeviceStore

__all__ = ["JsonFileDeviceStore", "MongoDeviceStore", "to_document", "to_entity"]
