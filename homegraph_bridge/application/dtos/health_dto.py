"""DTOs for system health responses."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from homegraph_bridge.domain.entities.health import (
    DependencyStatus,
    ServiceStatus,
    SystemHealth,
)


class DependencyStatusDTO(BaseModel):
    """Serializable representation of a dependency health check."""

    name: str = Field(description="Dependency identifier")
    status: ServiceStatus = Field(description="Status of the dependency")
    message: Optional[str] = Field(
        default=None, description="Human readable status note"
    )
    checked_at: datetime = Field(description="Timestamp of the last check")
    latency_ms: Optional[float] = Field(
        default=None, description="Latency in milliseconds"
    )
    details: Dict[str, Any] = Field(
        default_factory=dict, description="Backend specific details"
    )

    @classmethod
    def from_domain(cls, status: DependencyStatus) -> "DependencyStatusDTO":
        return cls(
            name=status.name,
            status=status.status,
            message=status.message,
            checked_at=status.checked_at,
            latency_ms=status.latency_ms,
            details=status.details,
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "device_store",
                "status": "up",
                "message": "Device catalog file is readable and writable",
                "checked_at": "2024-09-09T12:00:00Z",
                "latency_ms": None,
                "details": {"backend": "file", "path": "googleDevices.json"},
            }
        }
    }


class SystemHealthDTO(BaseModel):
    """DTO representing the /health response payload."""

    status: ServiceStatus = Field(description="Overall system status")
    device_count: int = Field(0, description="Devices in the catalog")
    dependencies: List[DependencyStatusDTO] = Field(
        default_factory=list, description="Detailed dependency information"
    )

    @classmethod
    def from_domain(cls, health: SystemHealth) -> "SystemHealthDTO":
        return cls(
            status=health.status,
            device_count=health.device_count,
            dependencies=[
                DependencyStatusDTO.from_domain(dep) for dep in health.dependencies
            ],
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "status": "up",
                "device_count": 3,
                "dependencies": [
                    {
                        "name": "device_store",
                        "status": "up",
                        "message": "MongoDB ping successful",
                        "checked_at": "2024-09-09T12:00:00Z",
                        "latency_ms": 2.1,
                        "details": {"backend": "mongo", "collection": "devices"},
                    }
                ],
            }
        }
    }
