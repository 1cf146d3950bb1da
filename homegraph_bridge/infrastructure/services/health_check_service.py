"""Infrastructure implementation for system health checks."""

from __future__ import annotations

import asyncio
from typing import Iterable

from homegraph_bridge.domain.entities.health import (
    DependencyStatus,
    ServiceStatus,
    SystemHealth,
)
from homegraph_bridge.domain.ports.device_store import IDeviceStore
from homegraph_bridge.domain.ports.health_check import IHealthCheckService
from homegraph_bridge.domain.repositories.device_repository import IDeviceRepository


class HealthCheckService(IHealthCheckService):
    """Collect health information for the device store and catalog."""

    def __init__(
        self,
        device_store: IDeviceStore,
        device_repository: IDeviceRepository,
        *,
        check_timeout: float = 5.0,
    ) -> None:
        self._device_store = device_store
        self._device_repository = device_repository
        self._check_timeout = check_timeout

    async def evaluate(self) -> SystemHealth:
        """Check the store and aggregate system health."""
        store_status = await self._check_store()
        device_count = await self._device_repository.count()

        return SystemHealth(
            status=self._aggregate_status([store_status]),
            device_count=device_count,
            dependencies=[store_status],
        )

    def _aggregate_status(self, statuses: Iterable[DependencyStatus]) -> ServiceStatus:
        has_unknown = False
        has_degraded = False

        for status in statuses:
            if status.status == ServiceStatus.DOWN:
                return ServiceStatus.DOWN
            if status.status == ServiceStatus.DEGRADED:
                has_degraded = True
            if status.status == ServiceStatus.UNKNOWN:
                has_unknown = True

        if has_degraded:
            return ServiceStatus.DEGRADED
        if has_unknown:
            return ServiceStatus.UNKNOWN
        return ServiceStatus.UP

    async def _check_store(self) -> DependencyStatus:
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(self._device_store.check),
                timeout=self._check_timeout,
            )
        except asyncio.TimeoutError:
            return DependencyStatus(
                name="device_store",
                status=ServiceStatus.DOWN,
                message=f"Device store check timed out after {self._check_timeout}s",
            )
        except Exception as exc:
            return DependencyStatus(
                name="device_store",
                status=ServiceStatus.DOWN,
                message=f"Device store check failed: {exc}",
            )
