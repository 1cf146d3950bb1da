"""
Device DTOs - Application Layer

This module defines Data Transfer Objects (DTOs) for the device edit API.
Name lists may be sent either as JSON arrays or as a single comma-separated
string, the way they are typed into the device form.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from homegraph_bridge.domain.entities.device import (
    Device,
    DeviceInfo,
    DeviceTrait,
    TraitType,
)
from homegraph_bridge.domain.services import join_comma_list, parse_comma_list


def _normalize_names(value: Any) -> Any:
    if value is None:
        return value
    if isinstance(value, str):
        return parse_comma_list(value)
    if isinstance(value, list):
        return [
            item.strip() for item in value if isinstance(item, str) and item.strip()
        ]
    return value


def _raw(value: Any) -> Any:
    return getattr(value, "value", value)


def as_enum(enum_cls: Any, value: Any) -> Any:
    """Return the enum member for ``value``, or ``value`` itself if unknown."""
    try:
        return enum_cls(value)
    except ValueError:
        return value


class DeviceTraitDTO(BaseModel):
    """DTO describing a trait attached to a device."""

    trait: str = Field(
        ..., description="Trait identifier, e.g. action.devices.traits.OnOff"
    )
    # Left untyped so the device validator can report a non-mapping value.
    attributes: Optional[Any] = Field(
        None, description="Static trait attributes reported on SYNC"
    )
    commands: Dict[str, Dict[str, str]] = Field(
        default_factory=dict, description="Command parameter to MQTT topic mapping"
    )
    state: Dict[str, Any] = Field(
        default_factory=dict, description="State key to MQTT topic mapping"
    )

    def to_domain(self) -> DeviceTrait:
        return DeviceTrait(
            trait=as_enum(TraitType, self.trait),
            attributes=self.attributes,
            commands=dict(self.commands),
            state=dict(self.state),
        )

    @classmethod
    def from_domain(cls, trait: DeviceTrait) -> "DeviceTraitDTO":
        return cls(
            trait=_raw(trait.trait),
            attributes=trait.attributes,
            commands=trait.commands,
            state=trait.state,
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "trait": "action.devices.traits.Brightness",
                "attributes": {"brightnessRange": [0, 100]},
                "commands": {
                    "action.devices.commands.BrightnessAbsolute": {
                        "brightness": "home/light1/brightness/set"
                    }
                },
                "state": {"brightness": "home/light1/brightness"},
            }
        }
    }


class DeviceInfoDTO(BaseModel):
    """DTO for the optional hardware description."""

    manufacturer: Optional[str] = None
    model: Optional[str] = None
    hw_version: Optional[str] = None
    sw_version: Optional[str] = None

    @classmethod
    def from_domain(cls, info: Optional[DeviceInfo]) -> Optional["DeviceInfoDTO"]:
        if info is None:
            return None
        return cls(
            manufacturer=info.manufacturer,
            model=info.model,
            hw_version=info.hw_version,
            sw_version=info.sw_version,
        )


class DeviceCreateDTO(BaseModel):
    """DTO for creating a new device."""

    id: str = Field(..., description="Unique device id")
    name: str = Field("", description="Primary name of the device")
    default_names: List[str] = Field(
        default_factory=list,
        description="Manufacturer names, as a list or a comma-separated string",
    )
    nicknames: List[str] = Field(
        default_factory=list,
        description="User nicknames, as a list or a comma-separated string",
    )
    type: str = Field(
        "action.devices.types.SWITCH", description="Device type identifier"
    )
    room_hint: Optional[str] = Field(None, description="Room the device is in")
    will_report_state: bool = Field(
        False, description="Whether the device reports state on its own"
    )
    traits: List[DeviceTraitDTO] = Field(
        default_factory=list, description="Traits in declaration order"
    )
    manufacturer: Optional[str] = None
    model: Optional[str] = None
    hw_version: Optional[str] = None
    sw_version: Optional[str] = None
    custom_data: Optional[Dict[str, Any]] = Field(
        None, description="Opaque data echoed back by the assistant"
    )

    @field_validator("default_names", "nicknames", mode="before")
    @classmethod
    def split_names(cls, v: Union[str, List[str], None]) -> Any:
        """Accept comma-separated strings for name lists."""
        return _normalize_names(v) if v is not None else []

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": "light1",
                "name": "Kitchen light",
                "default_names": "Ceiling light, Dimmer",
                "nicknames": ["kitchen"],
                "type": "action.devices.types.LIGHT",
                "room_hint": "Kitchen",
                "will_report_state": False,
                "traits": [
                    {"trait": "action.devices.traits.OnOff"},
                    {
                        "trait": "action.devices.traits.Brightness",
                        "attributes": {"brightnessRange": [0, 100]},
                    },
                ],
                "manufacturer": "Acme",
                "model": "L-100",
            }
        }
    }


class DeviceUpdateDTO(BaseModel):
    """DTO for editing a device. Only the fields that are sent are applied."""

    id: Optional[str] = Field(None, description="New id, to rename the device")
    name: Optional[str] = None
    default_names: Optional[List[str]] = None
    nicknames: Optional[List[str]] = None
    type: Optional[str] = None
    room_hint: Optional[str] = None
    will_report_state: Optional[bool] = None
    traits: Optional[List[DeviceTraitDTO]] = None
    manufacturer: Optional[str] = None
    model: Optional[str] = None
    hw_version: Optional[str] = None
    sw_version: Optional[str] = None
    custom_data: Optional[Dict[str, Any]] = None

    @field_validator("default_names", "nicknames", mode="before")
    @classmethod
    def split_names(cls, v: Union[str, List[str], None]) -> Any:
        return _normalize_names(v)

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Kitchen ceiling light",
                "nicknames": "kitchen, ceiling",
                "room_hint": "Kitchen",
            }
        }
    }


class DeviceResponseDTO(BaseModel):
    """DTO for device responses."""

    id: str
    name: str
    default_names: List[str] = Field(default_factory=list)
    nicknames: List[str] = Field(default_factory=list)
    type: str
    room_hint: Optional[str] = None
    will_report_state: bool = False
    traits: List[DeviceTraitDTO] = Field(default_factory=list)
    device_info: Optional[DeviceInfoDTO] = None
    custom_data: Optional[Dict[str, Any]] = None

    @classmethod
    def from_domain(cls, device: Device) -> "DeviceResponseDTO":
        return cls(
            id=device.id,
            name=device.name.name,
            default_names=list(device.name.default_names),
            nicknames=list(device.name.nicknames),
            type=_raw(device.type),
            room_hint=device.room_hint,
            will_report_state=device.will_report_state,
            traits=[DeviceTraitDTO.from_domain(trait) for trait in device.traits],
            device_info=DeviceInfoDTO.from_domain(device.device_info),
            custom_data=device.custom_data,
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": "light1",
                "name": "Kitchen light",
                "default_names": ["Ceiling light", "Dimmer"],
                "nicknames": ["kitchen"],
                "type": "action.devices.types.LIGHT",
                "room_hint": "Kitchen",
                "will_report_state": False,
                "traits": [
                    {
                        "trait": "action.devices.traits.OnOff",
                        "attributes": None,
                        "commands": {},
                        "state": {},
                    }
                ],
                "device_info": {
                    "manufacturer": "Acme",
                    "model": "L-100",
                    "hw_version": None,
                    "sw_version": None,
                },
                "custom_data": None,
            }
        }
    }


class DeviceFormDTO(BaseModel):
    """Device prepared for the edit form, name lists joined with commas."""

    id: str
    name: str
    default_names: str = ""
    nicknames: str = ""
    type: str
    room_hint: str = ""
    will_report_state: bool = False
    traits: List[DeviceTraitDTO] = Field(default_factory=list)
    manufacturer: str = ""
    model: str = ""
    hw_version: str = ""
    sw_version: str = ""
    custom_data: Optional[Dict[str, Any]] = None

    @classmethod
    def from_domain(cls, device: Device) -> "DeviceFormDTO":
        info = device.device_info or DeviceInfo()
        return cls(
            id=device.id,
            name=device.name.name,
            default_names=join_comma_list(device.name.default_names),
            nicknames=join_comma_list(device.name.nicknames),
            type=_raw(device.type),
            room_hint=device.room_hint or "",
            will_report_state=device.will_report_state,
            traits=[DeviceTraitDTO.from_domain(trait) for trait in device.traits],
            manufacturer=info.manufacturer or "",
            model=info.model or "",
            hw_version=info.hw_version or "",
            sw_version=info.sw_version or "",
            custom_data=device.custom_data,
        )
