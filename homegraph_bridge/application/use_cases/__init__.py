"""
Use Cases Package - Application Layer

This package contains use cases that implement the business logic
of the application: device catalog edits, fulfillment dispatch and
health reporting.
"""

from .device_use_cases import (
    CreateDeviceUseCase,
    DeleteDeviceUseCase,
    GetDeviceByIdUseCase,
    GetDeviceFormUseCase,
    GetDevicesUseCase,
    UpdateDeviceUseCase,
)
from .fulfillment_use_case import FulfillmentUseCase, parse_intent
from .health_use_cases import GetHealthStatusUseCase
from .intent_handlers import (
    DisconnectIntentHandler,
    IIntentHandler,
    QueryIntentHandler,
    SyncIntentHandler,
)

__all__ = [
    "CreateDeviceUseCase",
    "DeleteDeviceUseCase",
    "GetDeviceByIdUseCase",
    "GetDeviceFormUseCase",
    "GetDevicesUseCase",
    "UpdateDeviceUseCase",
    "FulfillmentUseCase",
    "parse_intent",
    "GetHealthStatusUseCase",
    "DisconnectIntentHandler",
    "IIntentHandler",
    "QueryIntentHandler",
    "SyncIntentHandler",
]
