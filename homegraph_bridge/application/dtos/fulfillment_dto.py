"""
Fulfillment DTOs - Application Layer

Request and response shapes of the smart-home fulfillment webhook. Field
names follow the protocol (camelCase) through aliases; responses are
dumped with ``by_alias=True, exclude_none=True`` so optional fields that
are not set are left out.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from homegraph_bridge.domain.entities.device import DeviceInfo, NameInfo
from homegraph_bridge.domain.entities.intents import (
    ErrorResponsePayload,
    QueryResponsePayload,
    SyncDevice,
    SyncResponsePayload,
)


def _raw(value: Any) -> Any:
    return getattr(value, "value", value)


class _ProtocolModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class FulfillmentInputDTO(_ProtocolModel):
    """One entry of the ``inputs`` array."""

    intent: str = Field(..., description="Intent identifier")
    payload: Dict[str, Any] = Field(
        default_factory=dict, description="Intent specific payload"
    )


class FulfillmentRequestDTO(_ProtocolModel):
    """Fulfillment request posted by the assistant."""

    request_id: str = Field(..., description="Id echoed back in the response")
    inputs: List[FulfillmentInputDTO] = Field(..., min_length=1)

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "requestId": "ff36a3cc-ec34-11e6-b1a0-64510650abcf",
                "inputs": [{"intent": "action.devices.SYNC"}],
            }
        },
    )


class NameDTO(_ProtocolModel):
    name: str = ""
    default_names: List[str] = Field(default_factory=list)
    nicknames: List[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, name: NameInfo) -> "NameDTO":
        return cls(
            name=name.name,
            default_names=list(name.default_names),
            nicknames=list(name.nicknames),
        )


class SyncDeviceInfoDTO(_ProtocolModel):
    manufacturer: Optional[str] = None
    model: Optional[str] = None
    hw_version: Optional[str] = None
    sw_version: Optional[str] = None

    @classmethod
    def from_domain(cls, info: Optional[DeviceInfo]) -> Optional["SyncDeviceInfoDTO"]:
        if info is None:
            return None
        return cls(
            manufacturer=info.manufacturer,
            model=info.model,
            hw_version=info.hw_version,
            sw_version=info.sw_version,
        )


class SyncDeviceDTO(_ProtocolModel):
    """Device entry of a SYNC response."""

    id: str
    type: str
    traits: List[str] = Field(default_factory=list)
    name: NameDTO
    will_report_state: bool = False
    attributes: Dict[str, Any] = Field(default_factory=dict)
    room_hint: Optional[str] = None
    device_info: Optional[SyncDeviceInfoDTO] = None
    custom_data: Optional[Dict[str, Any]] = None

    @classmethod
    def from_domain(cls, device: SyncDevice) -> "SyncDeviceDTO":
        return cls(
            id=device.id,
            type=_raw(device.type),
            traits=[_raw(trait) for trait in device.traits],
            name=NameDTO.from_domain(device.name),
            will_report_state=device.will_report_state,
            attributes=device.attributes,
            room_hint=device.room_hint,
            device_info=SyncDeviceInfoDTO.from_domain(device.device_info),
            custom_data=device.custom_data,
        )


class SyncPayloadDTO(_ProtocolModel):
    agent_user_id: str = ""
    devices: List[SyncDeviceDTO] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, payload: SyncResponsePayload) -> "SyncPayloadDTO":
        return cls(
            agent_user_id=payload.agent_user_id,
            devices=[SyncDeviceDTO.from_domain(device) for device in payload.devices],
        )


class QueryPayloadDTO(_ProtocolModel):
    devices: Dict[str, Dict[str, Any]] = Field(default_factory=dict)

    @classmethod
    def from_domain(cls, payload: QueryResponsePayload) -> "QueryPayloadDTO":
        return cls(devices=payload.devices)


class ErrorPayloadDTO(_ProtocolModel):
    error_code: str
    debug_string: Optional[str] = None

    @classmethod
    def from_domain(cls, payload: ErrorResponsePayload) -> "ErrorPayloadDTO":
        return cls(
            error_code=_raw(payload.error_code),
            debug_string=payload.debug_string,
        )


class FulfillmentResponseDTO(_ProtocolModel):
    """Envelope returned for every intent except DISCONNECT."""

    request_id: str
    payload: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "requestId": "ff36a3cc-ec34-11e6-b1a0-64510650abcf",
                "payload": {
                    "agentUserId": "user-1",
                    "devices": [
                        {
                            "id": "light1",
                            "type": "action.devices.types.LIGHT",
                            "traits": [
                                "action.devices.traits.OnOff",
                                "action.devices.traits.Brightness",
                            ],
                            "name": {
                                "name": "Kitchen light",
                                "defaultNames": [],
                                "nicknames": [],
                            },
                            "willReportState": False,
                            "attributes": {"brightnessRange": [0, 100]},
                        }
                    ],
                },
            }
        },
    )
