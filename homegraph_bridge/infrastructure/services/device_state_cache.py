"""
In-memory device state cache.

Holds the last known state of each device for QUERY answers. The
message-bus consumer, which lives outside this service, pushes updates
through ``update_state`` and ``replace_state``. Catalog edits call
``rename`` and ``remove`` so state never outlives its device id.
"""

from __future__ import annotations

import copy
from threading import Lock
from typing import Any, Dict, Optional

from homegraph_bridge.domain.ports.device_state import IDeviceStateRegistry


class InMemoryDeviceStateCache(IDeviceStateRegistry):
    """Thread-safe map of device id to last reported state."""

    def __init__(self) -> None:
        self._states: Dict[str, Dict[str, Any]] = {}
        self._lock = Lock()

    def update_state(self, device_id: str, state: Dict[str, Any]) -> Dict[str, Any]:
        """Merge ``state`` into the stored state and return the result."""
        with self._lock:
            merged = {**self._states.get(device_id, {}), **state}
            self._states[device_id] = merged
            return copy.deepcopy(merged)

    def replace_state(self, device_id: str, state: Dict[str, Any]) -> None:
        with self._lock:
            self._states[device_id] = copy.deepcopy(state)

    def get_state(self, device_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            state = self._states.get(device_id)
            return copy.deepcopy(state) if state is not None else None

    def rename(self, old_id: str, new_id: str) -> None:
        """Move the state of a renamed device; no-op if nothing is stored."""
        with self._lock:
            if old_id in self._states:
                self._states[new_id] = self._states.pop(old_id)

    def remove(self, device_id: str) -> None:
        with self._lock:
            self._states.pop(device_id, None)
