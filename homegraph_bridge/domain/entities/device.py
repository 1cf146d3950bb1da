"""
Domain Entities - Device

Devices and traits exposed to the Google Assistant. The enums carry the
protocol identifiers as values so that entities can be projected onto the
smart-home payloads without a lookup table.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

_DEVICE_TYPE_PREFIX = "action.devices.types."
_TRAIT_PREFIX = "action.devices.traits."


class DeviceType(str, Enum):
    """Device categories recognized by the Home Graph."""

    AC_UNIT = _DEVICE_TYPE_PREFIX + "AC_UNIT"
    AIRFRESHENER = _DEVICE_TYPE_PREFIX + "AIRFRESHENER"
    AIRPURIFIER = _DEVICE_TYPE_PREFIX + "AIRPURIFIER"
    AWNING = _DEVICE_TYPE_PREFIX + "AWNING"
    BATHTUB = _DEVICE_TYPE_PREFIX + "BATHTUB"
    BED = _DEVICE_TYPE_PREFIX + "BED"
    BLENDER = _DEVICE_TYPE_PREFIX + "BLENDER"
    BLINDS = _DEVICE_TYPE_PREFIX + "BLINDS"
    BOILER = _DEVICE_TYPE_PREFIX + "BOILER"
    CAMERA = _DEVICE_TYPE_PREFIX + "CAMERA"
    CHARGER = _DEVICE_TYPE_PREFIX + "CHARGER"
    CLOSET = _DEVICE_TYPE_PREFIX + "CLOSET"
    COFFEE_MAKER = _DEVICE_TYPE_PREFIX + "COFFEE_MAKER"
    COOKTOP = _DEVICE_TYPE_PREFIX + "COOKTOP"
    CURTAIN = _DEVICE_TYPE_PREFIX + "CURTAIN"
    DEHUMIDIFIER = _DEVICE_TYPE_PREFIX + "DEHUMIDIFIER"
    DEHYDRATOR = _DEVICE_TYPE_PREFIX + "DEHYDRATOR"
    DISHWASHER = _DEVICE_TYPE_PREFIX + "DISHWASHER"
    DOOR = _DEVICE_TYPE_PREFIX + "DOOR"
    DOORBELL = _DEVICE_TYPE_PREFIX + "DOORBELL"
    DRAWER = _DEVICE_TYPE_PREFIX + "DRAWER"
    DRYER = _DEVICE_TYPE_PREFIX + "DRYER"
    FAN = _DEVICE_TYPE_PREFIX + "FAN"
    FAUCET = _DEVICE_TYPE_PREFIX + "FAUCET"
    FIREPLACE = _DEVICE_TYPE_PREFIX + "FIREPLACE"
    FREEZER = _DEVICE_TYPE_PREFIX + "FREEZER"
    FRYER = _DEVICE_TYPE_PREFIX + "FRYER"
    GARAGE = _DEVICE_TYPE_PREFIX + "GARAGE"
    GATE = _DEVICE_TYPE_PREFIX + "GATE"
    GRILL = _DEVICE_TYPE_PREFIX + "GRILL"
    HEATER = _DEVICE_TYPE_PREFIX + "HEATER"
    HOOD = _DEVICE_TYPE_PREFIX + "HOOD"
    HUMIDIFIER = _DEVICE_TYPE_PREFIX + "HUMIDIFIER"
    KETTLE = _DEVICE_TYPE_PREFIX + "KETTLE"
    LIGHT = _DEVICE_TYPE_PREFIX + "LIGHT"
    LOCK = _DEVICE_TYPE_PREFIX + "LOCK"
    MICROWAVE = _DEVICE_TYPE_PREFIX + "MICROWAVE"
    MOP = _DEVICE_TYPE_PREFIX + "MOP"
    MOWER = _DEVICE_TYPE_PREFIX + "MOWER"
    MULTICOOKER = _DEVICE_TYPE_PREFIX + "MULTICOOKER"
    NETWORK = _DEVICE_TYPE_PREFIX + "NETWORK"
    OUTLET = _DEVICE_TYPE_PREFIX + "OUTLET"
    OVEN = _DEVICE_TYPE_PREFIX + "OVEN"
    PERGOLA = _DEVICE_TYPE_PREFIX + "PERGOLA"
    PETFEEDER = _DEVICE_TYPE_PREFIX + "PETFEEDER"
    PRESSURECOOKER = _DEVICE_TYPE_PREFIX + "PRESSURECOOKER"
    RADIATOR = _DEVICE_TYPE_PREFIX + "RADIATOR"
    REFRIGERATOR = _DEVICE_TYPE_PREFIX + "REFRIGERATOR"
    ROUTER = _DEVICE_TYPE_PREFIX + "ROUTER"
    SCENE = _DEVICE_TYPE_PREFIX + "SCENE"
    SECURITYSYSTEM = _DEVICE_TYPE_PREFIX + "SECURITYSYSTEM"
    SENSOR = _DEVICE_TYPE_PREFIX + "SENSOR"
    SETTOP = _DEVICE_TYPE_PREFIX + "SETTOP"
    SHOWER = _DEVICE_TYPE_PREFIX + "SHOWER"
    SHUTTER = _DEVICE_TYPE_PREFIX + "SHUTTER"
    SMOKE_DETECTOR = _DEVICE_TYPE_PREFIX + "SMOKE_DETECTOR"
    SOUSVIDE = _DEVICE_TYPE_PREFIX + "SOUSVIDE"
    SPEAKER = _DEVICE_TYPE_PREFIX + "SPEAKER"
    SPRINKLER = _DEVICE_TYPE_PREFIX + "SPRINKLER"
    STANDMIXER = _DEVICE_TYPE_PREFIX + "STANDMIXER"
    SWITCH = _DEVICE_TYPE_PREFIX + "SWITCH"
    THERMOSTAT = _DEVICE_TYPE_PREFIX + "THERMOSTAT"
    TV = _DEVICE_TYPE_PREFIX + "TV"
    VACUUM = _DEVICE_TYPE_PREFIX + "VACUUM"
    VALVE = _DEVICE_TYPE_PREFIX + "VALVE"
    WASHER = _DEVICE_TYPE_PREFIX + "WASHER"
    WATERHEATER = _DEVICE_TYPE_PREFIX + "WATERHEATER"
    WATERPURIFIER = _DEVICE_TYPE_PREFIX + "WATERPURIFIER"
    WATERSOFTENER = _DEVICE_TYPE_PREFIX + "WATERSOFTENER"
    WINDOW = _DEVICE_TYPE_PREFIX + "WINDOW"
    YOGURTMAKER = _DEVICE_TYPE_PREFIX + "YOGURTMAKER"


class TraitType(str, Enum):
    """Capability traits a device can declare."""

    APP_SELECTOR = _TRAIT_PREFIX + "AppSelector"
    ARM_DISARM = _TRAIT_PREFIX + "ArmDisarm"
    BRIGHTNESS = _TRAIT_PREFIX + "Brightness"
    CAMERA_STREAM = _TRAIT_PREFIX + "CameraStream"
    CHANNEL = _TRAIT_PREFIX + "Channel"
    COLOR_SETTING = _TRAIT_PREFIX + "ColorSetting"
    COOK = _TRAIT_PREFIX + "Cook"
    DISPENSE = _TRAIT_PREFIX + "Dispense"
    DOCK = _TRAIT_PREFIX + "Dock"
    ENERGY_STORAGE = _TRAIT_PREFIX + "EnergyStorage"
    FAN_SPEED = _TRAIT_PREFIX + "FanSpeed"
    FILL = _TRAIT_PREFIX + "Fill"
    HUMIDITY_SETTING = _TRAIT_PREFIX + "HumiditySetting"
    INPUT_SELECTOR = _TRAIT_PREFIX + "InputSelector"
    LIGHT_EFFECTS = _TRAIT_PREFIX + "LightEffects"
    LOCATOR = _TRAIT_PREFIX + "Locator"
    LOCK_UNLOCK = _TRAIT_PREFIX + "LockUnlock"
    MEDIA_STATE = _TRAIT_PREFIX + "MediaState"
    MODES = _TRAIT_PREFIX + "Modes"
    NETWORK_CONTROL = _TRAIT_PREFIX + "NetworkControl"
    OBJECT_DETECTION = _TRAIT_PREFIX + "ObjectDetection"
    ON_OFF = _TRAIT_PREFIX + "OnOff"
    OPEN_CLOSE = _TRAIT_PREFIX + "OpenClose"
    REBOOT = _TRAIT_PREFIX + "Reboot"
    ROTATION = _TRAIT_PREFIX + "Rotation"
    RUN_CYCLE = _TRAIT_PREFIX + "RunCycle"
    SCENE = _TRAIT_PREFIX + "Scene"
    SENSOR_STATE = _TRAIT_PREFIX + "SensorState"
    SOFTWARE_UPDATE = _TRAIT_PREFIX + "SoftwareUpdate"
    START_STOP = _TRAIT_PREFIX + "StartStop"
    STATUS_REPORT = _TRAIT_PREFIX + "StatusReport"
    TEMPERATURE_CONTROL = _TRAIT_PREFIX + "TemperatureControl"
    TEMPERATURE_SETTING = _TRAIT_PREFIX + "TemperatureSetting"
    TIMER = _TRAIT_PREFIX + "Timer"
    TOGGLES = _TRAIT_PREFIX + "Toggles"
    TRANSPORT_CONTROL = _TRAIT_PREFIX + "TransportControl"
    VOLUME = _TRAIT_PREFIX + "Volume"


@dataclass(slots=True)
class NameInfo:
    """Names the assistant may use to address a device."""

    name: str = ""
    default_names: List[str] = field(default_factory=list)
    nicknames: List[str] = field(default_factory=list)


@dataclass(slots=True)
class DeviceInfo:
    """Optional hardware description. Only attached when a field is set."""

    manufacturer: Optional[str] = None
    model: Optional[str] = None
    hw_version: Optional[str] = None
    sw_version: Optional[str] = None

    def has_content(self) -> bool:
        return any(
            value
            for value in (
                self.manufacturer,
                self.model,
                self.hw_version,
                self.sw_version,
            )
        )


@dataclass(slots=True)
class DeviceTrait:
    """A capability attached to a device.

    ``attributes`` describes static capabilities reported on SYNC.
    ``commands`` and ``state`` hold the MQTT topic mapping used by the
    execute and state-reporting paths; they are stored and round-tripped
    but not interpreted here.
    """

    trait: TraitType
    attributes: Optional[Dict[str, Any]] = None
    commands: Dict[str, Dict[str, str]] = field(default_factory=dict)
    state: Dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class Device:
    """One addressable smart-home entity exposed to the assistant."""

    id: str
    name: NameInfo = field(default_factory=NameInfo)
    type: DeviceType = DeviceType.SWITCH
    room_hint: Optional[str] = None
    will_report_state: bool = False
    traits: List[DeviceTrait] = field(default_factory=list)
    device_info: Optional[DeviceInfo] = None
    custom_data: Optional[Dict[str, Any]] = None

    def trait_types(self) -> List[TraitType]:
        """Trait kinds in declaration order."""
        return [trait.trait for trait in self.traits]
