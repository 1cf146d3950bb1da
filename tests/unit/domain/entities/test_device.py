from __future__ import annotations

from homegraph_bridge.domain.entities.device import (
    Device,
    DeviceInfo,
    DeviceTrait,
    DeviceType,
    NameInfo,
    TraitType,
)


def test_enums_carry_protocol_identifiers() -> None:
    assert DeviceType.LIGHT.value == "action.devices.types.LIGHT"
    assert TraitType.ON_OFF.value == "action.devices.traits.OnOff"
    assert TraitType("action.devices.traits.Brightness") is TraitType.BRIGHTNESS


def test_device_defaults() -> None:
    device = Device(id="d1")

    assert device.name == NameInfo()
    assert device.type is DeviceType.SWITCH
    assert device.traits == []
    assert device.will_report_state is False
    assert device.device_info is None
    assert device.custom_data is None


def test_default_collections_are_not_shared() -> None:
    first = Device(id="a")
    second = Device(id="b")

    first.traits.append(DeviceTrait(trait=TraitType.ON_OFF))
    first.name.nicknames.append("lamp")

    assert second.traits == []
    assert second.name.nicknames == []


def test_trait_types_keep_declaration_order(light_device: Device) -> None:
    assert light_device.trait_types() == [TraitType.ON_OFF, TraitType.BRIGHTNESS]


def test_device_info_has_content() -> None:
    assert DeviceInfo().has_content() is False
    assert DeviceInfo(manufacturer="", model="").has_content() is False
    assert DeviceInfo(sw_version="1.2").has_content() is True


def test_trait_defaults() -> None:
    trait = DeviceTrait(trait=TraitType.ON_OFF)
    assert trait.attributes is None
    assert trait.commands == {}
    assert trait.state == {}
