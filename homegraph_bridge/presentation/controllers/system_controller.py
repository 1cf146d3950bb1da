"""System endpoints exposing health."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, status

from homegraph_bridge.application.dtos.health_dto import SystemHealthDTO
from homegraph_bridge.application.use_cases.health_use_cases import (
    GetHealthStatusUseCase,
)
from homegraph_bridge.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["System"])


@router.get("/health", response_model=SystemHealthDTO)
@inject
async def health(
    get_health_status_use_case: GetHealthStatusUseCase = Depends(
        Provide["get_health_status_use_case"]
    ),
) -> SystemHealthDTO:
    """Return the health of the device store and the catalog size."""
    try:
        health_status = await get_health_status_use_case.execute()
        logger.debug(
            "health.check.success",
            status=health_status.status.value,
            device_count=health_status.device_count,
        )
        return health_status
    except Exception as exc:
        logger.error("health.check.failure", error=str(exc), exc_info=exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Unable to retrieve system health status",
        ) from exc
