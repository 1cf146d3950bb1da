"""Port for the durable storage behind the device repository."""

from __future__ import annotations

from typing import Any, Dict, List, Protocol

from homegraph_bridge.domain.entities.health import DependencyStatus

DeviceDocument = Dict[str, Any]


class IDeviceStore(Protocol):
    """Blocking store for serialized devices.

    Implementations work on whole catalogs: ``save`` replaces everything
    previously stored and ``load`` returns documents in the order they were
    saved. Failures surface as exceptions; the repository wraps them.
    """

    def load(self) -> List[DeviceDocument]:
        """Return every stored device document."""
        ...

    def save(self, documents: List[DeviceDocument]) -> None:
        """Replace the stored catalog with ``documents``."""
        ...

    def check(self) -> DependencyStatus:
        """Report whether the store is reachable."""
        ...
