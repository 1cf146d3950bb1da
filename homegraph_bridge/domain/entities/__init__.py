"""
Domain Entities Package

Devices, traits, intents and the errors raised around them.
"""

from .device import Device, DeviceInfo, DeviceTrait, DeviceType, NameInfo, TraitType
from .errors import (
    AttributeCollisionError,
    DeviceConflictError,
    DeviceNotFoundError,
    DeviceStorageError,
    DeviceValidationError,
    DomainError,
)
from .health import DependencyStatus, ServiceStatus, SystemHealth
from .intents import (
    DisconnectIntent,
    EmptyResponsePayload,
    ErrorResponsePayload,
    ExecuteIntent,
    Intent,
    IntentType,
    ProtocolErrorCode,
    QueryDeviceRef,
    QueryIntent,
    QueryResponsePayload,
    QueryStatus,
    ResponsePayload,
    SyncDevice,
    SyncIntent,
    SyncResponsePayload,
)

__all__ = [
    "Device",
    "DeviceInfo",
    "DeviceTrait",
    "DeviceType",
    "NameInfo",
    "TraitType",
    "DomainError",
    "DeviceNotFoundError",
    "DeviceConflictError",
    "DeviceValidationError",
    "DeviceStorageError",
    "AttributeCollisionError",
    "DependencyStatus",
    "ServiceStatus",
    "SystemHealth",
    "Intent",
    "IntentType",
    "SyncIntent",
    "QueryIntent",
    "QueryDeviceRef",
    "ExecuteIntent",
    "DisconnectIntent",
    "SyncDevice",
    "SyncResponsePayload",
    "QueryResponsePayload",
    "QueryStatus",
    "ErrorResponsePayload",
    "EmptyResponsePayload",
    "ProtocolErrorCode",
    "ResponsePayload",
]
