"""Ports for live device state fed by the message bus."""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol


class IDeviceStateProvider(Protocol):
    """Read side of the live state consumed by QUERY."""

    def get_state(self, device_id: str) -> Optional[Dict[str, Any]]:
        """Last known state of a device, or ``None`` if nothing was received."""
        ...


class IDeviceStateRegistry(IDeviceStateProvider, Protocol):
    """State kept in step with catalog edits.

    The message-bus consumer writes state; catalog edits only move or drop
    the entries of renamed and deleted devices.
    """

    def rename(self, old_id: str, new_id: str) -> None:
        ...

    def remove(self, device_id: str) -> None:
        ...
