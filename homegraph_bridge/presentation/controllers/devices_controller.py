"""
Devices Router - Presentation Layer

This module defines the FastAPI router for the device catalog edit API.
"""

from typing import List

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Response, status

from homegraph_bridge.application.dtos.device_dto import (
    DeviceCreateDTO,
    DeviceFormDTO,
    DeviceResponseDTO,
    DeviceUpdateDTO,
)
from homegraph_bridge.application.use_cases.device_use_cases import (
    CreateDeviceUseCase,
    DeleteDeviceUseCase,
    GetDeviceByIdUseCase,
    GetDeviceFormUseCase,
    GetDevicesUseCase,
    UpdateDeviceUseCase,
)
from homegraph_bridge.domain.entities.errors import (
    DeviceConflictError,
    DeviceNotFoundError,
    DeviceStorageError,
    DeviceValidationError,
    DomainError,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/devices", tags=["Devices"])


def _error_detail(error: DomainError):
    return {"message": error.message, **error.details} if error.details else str(error)


def _storage_failure(error: DeviceStorageError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Failed to persist the device catalog",
    )


@router.get("/", response_model=List[DeviceResponseDTO])
@inject
async def get_devices(
    get_devices_use_case: GetDevicesUseCase = Depends(Provide["get_devices_use_case"]),
) -> List[DeviceResponseDTO]:
    """List every device of the catalog in insertion order."""
    return await get_devices_use_case.execute()


@router.get("/{device_id}", response_model=DeviceResponseDTO)
@inject
async def get_device_by_id(
    device_id: str,
    get_device_use_case: GetDeviceByIdUseCase = Depends(
        Provide["get_device_by_id_use_case"]
    ),
) -> DeviceResponseDTO:
    try:
        return await get_device_use_case.execute(device_id)
    except DeviceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/{device_id}/form", response_model=DeviceFormDTO)
@inject
async def get_device_form(
    device_id: str,
    get_device_form_use_case: GetDeviceFormUseCase = Depends(
        Provide["get_device_form_use_case"]
    ),
) -> DeviceFormDTO:
    """Return the device with its name lists joined for editing."""
    try:
        return await get_device_form_use_case.execute(device_id)
    except DeviceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post(
    "/",
    response_model=DeviceResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_device(
    device_dto: DeviceCreateDTO,
    create_device_use_case: CreateDeviceUseCase = Depends(
        Provide["create_device_use_case"]
    ),
) -> DeviceResponseDTO:
    """
    Add a device to the catalog.

    A taken id is reported together with the validation errors.
    """
    try:
        return await create_device_use_case.execute(device_dto)
    except DeviceValidationError as e:
        logger.info("devices.create.invalid", device_id=device_dto.id, errors=e.errors)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=_error_detail(e)
        )
    except DeviceStorageError as e:
        logger.error("devices.create.persist_failed", error=str(e), details=e.details)
        raise _storage_failure(e) from e


@router.put("/{device_id}", response_model=DeviceResponseDTO)
@inject
async def update_device(
    device_id: str,
    device_dto: DeviceUpdateDTO,
    update_device_use_case: UpdateDeviceUseCase = Depends(
        Provide["update_device_use_case"]
    ),
) -> DeviceResponseDTO:
    """Edit a device. Sending a new ``id`` renames it."""
    try:
        return await update_device_use_case.execute(device_id, device_dto)
    except DeviceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DeviceValidationError as e:
        logger.info("devices.update.invalid", device_id=device_id, errors=e.errors)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=_error_detail(e)
        )
    except DeviceConflictError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail=_error_detail(e)
        )
    except DeviceStorageError as e:
        logger.error("devices.update.persist_failed", error=str(e), details=e.details)
        raise _storage_failure(e) from e


@router.delete("/{device_id}", status_code=status.HTTP_204_NO_CONTENT)
@inject
async def delete_device(
    device_id: str,
    delete_device_use_case: DeleteDeviceUseCase = Depends(
        Provide["delete_device_use_case"]
    ),
) -> Response:
    try:
        await delete_device_use_case.execute(device_id)
    except DeviceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DeviceStorageError as e:
        logger.error("devices.delete.persist_failed", error=str(e), details=e.details)
        raise _storage_failure(e) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
