"""Helpers used when turning user input into device entities."""

from typing import Iterable, List, Optional

from homegraph_bridge.domain.entities.device import DeviceInfo


def parse_comma_list(raw: Optional[str]) -> List[str]:
    """Split a comma separated list into trimmed, non-empty entries.

    Order is preserved and duplicates are kept, since nicknames are ranked.

    >>> parse_comma_list(" Lamp, Desk lamp ,, ")
    ['Lamp', 'Desk lamp']
    """
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


def join_comma_list(values: Optional[Iterable[str]]) -> str:
    """Inverse of :func:`parse_comma_list` for presenting names to editors."""
    if not values:
        return ""
    return ",".join(values)


def _none_if_empty(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def build_device_info(
    manufacturer: Optional[str] = None,
    model: Optional[str] = None,
    hw_version: Optional[str] = None,
    sw_version: Optional[str] = None,
) -> Optional[DeviceInfo]:
    """Create a DeviceInfo block, or ``None`` when every field is empty."""
    info = DeviceInfo(
        manufacturer=_none_if_empty(manufacturer),
        model=_none_if_empty(model),
        hw_version=_none_if_empty(hw_version),
        sw_version=_none_if_empty(sw_version),
    )
    if not info.has_content():
        return None
    return info
