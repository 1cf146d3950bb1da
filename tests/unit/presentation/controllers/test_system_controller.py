from __future__ import annotations

import pytest
from fastapi import HTTPException

from homegraph_bridge.application.use_cases.health_use_cases import (
    GetHealthStatusUseCase,
)
from homegraph_bridge.domain.entities.health import (
    DependencyStatus,
    ServiceStatus,
    SystemHealth,
)
from homegraph_bridge.presentation.controllers.system_controller import health


class _HealthService:
    def __init__(self, status: ServiceStatus):
        self._health = SystemHealth(
            status=status,
            device_count=3,
            dependencies=[DependencyStatus(name="device_store", status=status)],
        )

    async def evaluate(self) -> SystemHealth:
        return self._health


@pytest.mark.asyncio
async def test_health_endpoint_returns_status():
    dto = await health(
        get_health_status_use_case=GetHealthStatusUseCase(
            _HealthService(ServiceStatus.UP)
        )
    )
    assert dto.status is ServiceStatus.UP
    assert dto.device_count == 3
    assert dto.dependencies[0].name == "device_store"


@pytest.mark.asyncio
async def test_health_endpoint_maps_failures_to_503():
    class _Broken:
        async def evaluate(self) -> SystemHealth:
            raise RuntimeError("boom")

    with pytest.raises(HTTPException) as exc:
        await health(get_health_status_use_case=GetHealthStatusUseCase(_Broken()))
    assert exc.value.status_code == 503
