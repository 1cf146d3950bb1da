"""
Domain Entities - Intents

The smart-home fulfillment protocol is a small family of intents. Each
intent kind is its own dataclass tagged with an :class:`IntentType`, and
``Intent`` is the union the dispatcher works with. Response payloads are
plain dataclasses as well; the application layer turns them into the
camelCase JSON the assistant expects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, Union

from .device import DeviceInfo, DeviceType, NameInfo, TraitType


class IntentType(str, Enum):
    """Intent identifiers sent by the assistant."""

    SYNC = "action.devices.SYNC"
    QUERY = "action.devices.QUERY"
    EXECUTE = "action.devices.EXECUTE"
    DISCONNECT = "action.devices.DISCONNECT"


class QueryStatus(str, Enum):
    """Per-device status reported in QUERY responses."""

    SUCCESS = "SUCCESS"
    OFFLINE = "OFFLINE"
    EXCEPTIONS = "EXCEPTIONS"
    ERROR = "ERROR"


class ProtocolErrorCode(str, Enum):
    """Error codes used in fulfillment payloads."""

    DEVICE_NOT_FOUND = "deviceNotFound"
    NOT_SUPPORTED = "notSupported"
    PROTOCOL_ERROR = "protocolError"


@dataclass(slots=True)
class SyncIntent:
    """Request to enumerate every device and its capabilities."""

    intent_type: ClassVar[IntentType] = IntentType.SYNC


@dataclass(slots=True)
class QueryDeviceRef:
    """A device referenced by a QUERY or EXECUTE request."""

    id: str
    custom_data: Optional[Dict[str, Any]] = None


@dataclass(slots=True)
class QueryIntent:
    """Request for the current state of some devices."""

    intent_type: ClassVar[IntentType] = IntentType.QUERY

    devices: List[QueryDeviceRef] = field(default_factory=list)


@dataclass(slots=True)
class ExecuteIntent:
    """Request to apply commands. Commands are kept in protocol form."""

    intent_type: ClassVar[IntentType] = IntentType.EXECUTE

    commands: List[Dict[str, Any]] = field(default_factory=list)


@dataclass(slots=True)
class DisconnectIntent:
    """Sent when the user unlinks the account."""

    intent_type: ClassVar[IntentType] = IntentType.DISCONNECT


Intent = Union[SyncIntent, QueryIntent, ExecuteIntent, DisconnectIntent]


@dataclass(slots=True)
class SyncDevice:
    """Device record as reported in a SYNC response."""

    id: str
    type: DeviceType
    traits: List[TraitType]
    name: NameInfo
    will_report_state: bool
    attributes: Dict[str, Any] = field(default_factory=dict)
    room_hint: Optional[str] = None
    device_info: Optional[DeviceInfo] = None
    custom_data: Optional[Dict[str, Any]] = None


@dataclass(slots=True)
class SyncResponsePayload:
    """Payload answering a SYNC intent."""

    agent_user_id: str
    devices: List[SyncDevice] = field(default_factory=list)


@dataclass(slots=True)
class QueryResponsePayload:
    """Payload answering a QUERY intent, keyed by device id."""

    devices: Dict[str, Dict[str, Any]] = field(default_factory=dict)


@dataclass(slots=True)
class ErrorResponsePayload:
    """Payload used when an intent cannot be fulfilled at all."""

    error_code: ProtocolErrorCode
    debug_string: Optional[str] = None


@dataclass(slots=True)
class EmptyResponsePayload:
    """Payload for intents that expect an empty body (DISCONNECT)."""


ResponsePayload = Union[
    SyncResponsePayload,
    QueryResponsePayload,
    ErrorResponsePayload,
    EmptyResponsePayload,
]
