"""Port for health reporting."""

from __future__ import annotations

from typing import Protocol

from homegraph_bridge.domain.entities.health import SystemHealth


class IHealthCheckService(Protocol):
    """Interface for retrieving the bridge health."""

    async def evaluate(self) -> SystemHealth:
        """Check the device store and summarize the catalog."""
        ...
