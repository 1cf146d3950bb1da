from __future__ import annotations

import pytest
from fastapi import HTTPException

from homegraph_bridge.application.dtos.device_dto import (
    DeviceCreateDTO,
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
)
from homegraph_bridge.infrastructure.repositories.device_repository import (
    DeviceRepository,
)
from homegraph_bridge.presentation.controllers.devices_controller import (
    create_device,
    delete_device,
    get_device_by_id,
    get_device_form,
    get_devices,
    update_device,
)


class _Failing:
    def __init__(self, error: Exception):
        self.error = error

    async def execute(self, *args, **kwargs):
        raise self.error


@pytest.fixture()
def repository(fake_device_store) -> DeviceRepository:
    return DeviceRepository(fake_device_store)


@pytest.mark.asyncio
async def test_get_devices_lists_catalog(repository, light_device) -> None:
    await repository.add(light_device)

    response = await get_devices(
        get_devices_use_case=GetDevicesUseCase(device_repository=repository)
    )

    assert [device.id for device in response] == ["light1"]


@pytest.mark.asyncio
async def test_get_device_by_id_not_found(repository) -> None:
    with pytest.raises(HTTPException) as exc:
        await get_device_by_id(
            device_id="ghost",
            get_device_use_case=GetDeviceByIdUseCase(device_repository=repository),
        )
    assert exc.value.status_code == 404


@pytest.mark.asyncio
async def test_create_device_returns_created(repository) -> None:
    response = await create_device(
        device_dto=DeviceCreateDTO(id="switch1", name="Pump"),
        create_device_use_case=CreateDeviceUseCase(device_repository=repository),
    )

    assert isinstance(response, DeviceResponseDTO)
    assert await repository.contains("switch1")


@pytest.mark.asyncio
async def test_create_device_invalid_returns_400_with_errors(
    repository, light_device
) -> None:
    await repository.add(light_device)

    with pytest.raises(HTTPException) as exc:
        await create_device(
            device_dto=DeviceCreateDTO(id="light1", name="Other"),
            create_device_use_case=CreateDeviceUseCase(device_repository=repository),
        )

    assert exc.value.status_code == 400
    assert exc.value.detail == {
        "message": "Device definition is invalid.",
        "errors": [DeviceConflictError.MESSAGE],
    }


@pytest.mark.asyncio
async def test_create_device_persist_failure_returns_500() -> None:
    with pytest.raises(HTTPException) as exc:
        await create_device(
            device_dto=DeviceCreateDTO(id="switch1", name="Pump"),
            create_device_use_case=_Failing(DeviceStorageError("disk full")),
        )
    assert exc.value.status_code == 500


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error, expected",
    [
        (DeviceNotFoundError("light1"), 404),
        (DeviceValidationError("invalid", details={"errors": ["x"]}), 400),
        (DeviceConflictError("switch1"), 409),
        (DeviceStorageError("disk full"), 500),
    ],
)
async def test_update_device_maps_errors(error, expected) -> None:
    with pytest.raises(HTTPException) as exc:
        await update_device(
            device_id="light1",
            device_dto=DeviceUpdateDTO(name="Lamp"),
            update_device_use_case=_Failing(error),
        )
    assert exc.value.status_code == expected


@pytest.mark.asyncio
async def test_update_device_returns_updated(repository, light_device) -> None:
    await repository.add(light_device)

    response = await update_device(
        device_id="light1",
        device_dto=DeviceUpdateDTO(room_hint="Hall"),
        update_device_use_case=UpdateDeviceUseCase(device_repository=repository),
    )

    assert response.room_hint == "Hall"


@pytest.mark.asyncio
async def test_delete_device_returns_204(repository, light_device) -> None:
    await repository.add(light_device)
    use_case = DeleteDeviceUseCase(device_repository=repository)

    response = await delete_device(device_id="light1", delete_device_use_case=use_case)

    assert response.status_code == 204
    with pytest.raises(HTTPException) as exc:
        await delete_device(device_id="light1", delete_device_use_case=use_case)
    assert exc.value.status_code == 404


@pytest.mark.asyncio
async def test_get_device_form(repository, switch_device) -> None:
    await repository.add(switch_device)
    use_case = GetDeviceFormUseCase(device_repository=repository)

    form = await get_device_form(device_id="switch1", get_device_form_use_case=use_case)

    assert form.nicknames == ""
    assert form.custom_data == {"topic": "garden/pump"}
    with pytest.raises(HTTPException) as exc:
        await get_device_form(device_id="ghost", get_device_form_use_case=use_case)
    assert exc.value.status_code == 404
