"""
Device Document Mapping - Infrastructure Layer

Conversion between device entities and the camelCase documents written to
the device catalog file (``googleDevices.json``) or to MongoDB. The layout
matches the assistant protocol so catalogs can be edited by hand.
"""

from enum import Enum
from typing import Any, Dict, Optional, Type, TypeVar

from homegraph_bridge.domain.entities.device import (
    Device,
    DeviceInfo,
    DeviceTrait,
    DeviceType,
    NameInfo,
    TraitType,
)

E = TypeVar("E", bound=Enum)


def _coerce_enum(enum_cls: Type[E], value: Any) -> Any:
    """Map a stored value onto ``enum_cls``, keeping unknown values as-is.

    Unknown types and traits are left for the validator to report instead of
    failing the whole catalog load.
    """
    try:
        return enum_cls(value)
    except ValueError:
        return value


def _raw(value: Any) -> Any:
    return getattr(value, "value", value)


def _device_info_to_document(info: Optional[DeviceInfo]) -> Optional[Dict[str, Any]]:
    if info is None:
        return None
    return {
        "manufacturer": info.manufacturer,
        "model": info.model,
        "hwVersion": info.hw_version,
        "swVersion": info.sw_version,
    }


def _device_info_to_entity(document: Optional[Dict[str, Any]]) -> Optional[DeviceInfo]:
    if not document:
        return None
    info = DeviceInfo(
        manufacturer=document.get("manufacturer"),
        model=document.get("model"),
        hw_version=document.get("hwVersion"),
        sw_version=document.get("swVersion"),
    )
    return info if info.has_content() else None


def to_document(device: Device) -> Dict[str, Any]:
    """Convert a Device entity to a storage document."""
    document: Dict[str, Any] = {
        "id": device.id,
        "type": _raw(device.type),
        "roomHint": device.room_hint,
        "willReportState": device.will_report_state,
        "name": {
            "name": device.name.name,
            "defaultNames": list(device.name.default_names),
            "nicknames": list(device.name.nicknames),
        },
        "traits": [
            {
                "trait": _raw(trait.trait),
                "attributes": trait.attributes,
                "commands": trait.commands,
                "state": trait.state,
            }
            for trait in device.traits
        ],
    }

    device_info = _device_info_to_document(device.device_info)
    if device_info is not None:
        document["deviceInfo"] = device_info
    if device.custom_data is not None:
        document["customData"] = device.custom_data

    return document


def to_entity(document: Dict[str, Any]) -> Device:
    """Convert a storage document to a Device entity."""
    name_payload = document.get("name") or {}
    if isinstance(name_payload, str):
        name_payload = {"name": name_payload}

    traits = [
        DeviceTrait(
            trait=_coerce_enum(TraitType, trait.get("trait")),
            attributes=trait.get("attributes"),
            commands=trait.get("commands") or {},
            state=trait.get("state") or {},
        )
        for trait in document.get("traits") or []
        if trait
    ]

    return Device(
        id=document["id"],
        name=NameInfo(
            name=name_payload.get("name") or "",
            default_names=list(name_payload.get("defaultNames") or []),
            nicknames=list(name_payload.get("nicknames") or []),
        ),
        type=_coerce_enum(DeviceType, document.get("type")),
        room_hint=document.get("roomHint"),
        will_report_state=bool(document.get("willReportState", False)),
        traits=traits,
        device_info=_device_info_to_entity(document.get("deviceInfo")),
        custom_data=document.get("customData"),
    )
