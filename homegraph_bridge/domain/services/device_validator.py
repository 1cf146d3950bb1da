"""Domain service helpers for validating device definitions."""

from typing import Any, List, Mapping, Optional, Sequence

from homegraph_bridge.domain.entities.device import (
    Device,
    DeviceInfo,
    DeviceTrait,
    DeviceType,
    TraitType,
)
from homegraph_bridge.domain.entities.errors import DeviceValidationError

_DEVICE_TYPES = frozenset(device_type.value for device_type in DeviceType)
_TRAIT_TYPES = frozenset(trait.value for trait in TraitType)


def _enum_value(value: Any) -> Any:
    return getattr(value, "value", value)


def _is_known(value: Any, known: frozenset) -> bool:
    return isinstance(value, str) and value in known


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def _validate_traits(traits: List[DeviceTrait], errors: List[str]) -> None:
    seen: List[Any] = []
    reported: List[Any] = []

    for idx, trait in enumerate(traits, start=1):
        kind = _enum_value(trait.trait)
        if not _is_known(kind, _TRAIT_TYPES):
            errors.append(f"Trait #{idx} '{kind}' is not a recognized trait.")

        if kind in seen and kind not in reported:
            errors.append(f"Trait '{kind}' is declared more than once.")
            reported.append(kind)
        seen.append(kind)

        if trait.attributes is not None and not isinstance(trait.attributes, Mapping):
            errors.append(f"Attributes of trait '{kind}' must be a mapping.")


def _validate_device_info(device_info: Optional[DeviceInfo], errors: List[str]) -> None:
    if device_info is None:
        return
    if not device_info.has_content():
        errors.append(
            "Device info must carry at least one non-empty field when present."
        )


def validate_device(device: Device) -> List[str]:
    """Check a device against the catalog rules.

    Every rule is evaluated, so the result lists all violations at once.
    An empty list means the device can be stored.
    """

    errors: List[str] = []

    if _is_blank(device.id):
        errors.append("Device Id is required.")

    if device.name is None or _is_blank(device.name.name):
        errors.append("Device name is required.")

    device_type = _enum_value(device.type)
    if not _is_known(device_type, _DEVICE_TYPES):
        errors.append(f"Device type '{device_type}' is not a recognized device type.")

    _validate_traits(device.traits or [], errors)
    _validate_device_info(device.device_info, errors)

    return errors


def ensure_device_is_valid(device: Device, prior_errors: Sequence[str] = ()) -> None:
    """Validate a device definition.

    Args:
        device: Device to check
        prior_errors: Errors found by the caller, such as a taken id. They
            are reported ahead of the rule violations.

    Raises:
        DeviceValidationError: If one or more validation rules fail.
    """

    errors = [*prior_errors, *validate_device(device)]
    if errors:
        raise DeviceValidationError(
            "Device definition is invalid.", details={"errors": errors}
        )
