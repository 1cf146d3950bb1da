"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .device_dto import (
    DeviceCreateDTO,
    DeviceFormDTO,
    DeviceInfoDTO,
    DeviceResponseDTO,
    DeviceTraitDTO,
    DeviceUpdateDTO,
)
from .fulfillment_dto import (
    ErrorPayloadDTO,
    FulfillmentInputDTO,
    FulfillmentRequestDTO,
    FulfillmentResponseDTO,
    QueryPayloadDTO,
    SyncDeviceDTO,
    SyncPayloadDTO,
)
from .health_dto import DependencyStatusDTO, SystemHealthDTO

__all__ = [
    "DeviceCreateDTO",
    "DeviceFormDTO",
    "DeviceInfoDTO",
    "DeviceResponseDTO",
    "DeviceTraitDTO",
    "DeviceUpdateDTO",
    "ErrorPayloadDTO",
    "FulfillmentInputDTO",
    "FulfillmentRequestDTO",
    "FulfillmentResponseDTO",
    "QueryPayloadDTO",
    "SyncDeviceDTO",
    "SyncPayloadDTO",
    "DependencyStatusDTO",
    "SystemHealthDTO",
]
