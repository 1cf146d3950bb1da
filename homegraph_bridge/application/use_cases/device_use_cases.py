"""
Device Use Cases - Application Layer

This module defines use cases for the device edit API. Every write runs
inside the repository edit session, so the checkout, validation, commit
and persist steps of one edit are never interleaved with another.
"""

from typing import List, Optional

from dependency_injector.wiring import Provide, inject

from homegraph_bridge.application.dtos.device_dto import (
    DeviceCreateDTO,
    DeviceFormDTO,
    DeviceResponseDTO,
    DeviceUpdateDTO,
    as_enum,
)
from homegraph_bridge.domain.entities.device import Device, DeviceType, NameInfo
from homegraph_bridge.domain.entities.errors import (
    DeviceConflictError,
    DeviceNotFoundError,
    DeviceValidationError,
)
from homegraph_bridge.domain.ports.device_state import IDeviceStateRegistry
from homegraph_bridge.domain.repositories.device_repository import IDeviceRepository
from homegraph_bridge.domain.services import build_device_info, ensure_device_is_valid
from homegraph_bridge.shared import get_logger

logger = get_logger(__name__)

_DEVICE_INFO_FIELDS = ("manufacturer", "model", "hw_version", "sw_version")


def _to_device(dto: DeviceCreateDTO) -> Device:
    return Device(
        id=dto.id,
        name=NameInfo(
            name=dto.name,
            default_names=list(dto.default_names),
            nicknames=list(dto.nicknames),
        ),
        type=as_enum(DeviceType, dto.type),
        room_hint=dto.room_hint or None,
        will_report_state=dto.will_report_state,
        traits=[trait.to_domain() for trait in dto.traits],
        device_info=build_device_info(
            manufacturer=dto.manufacturer,
            model=dto.model,
            hw_version=dto.hw_version,
            sw_version=dto.sw_version,
        ),
        custom_data=dto.custom_data,
    )


def _apply_update(device: Device, dto: DeviceUpdateDTO) -> None:
    """Copy the fields sent in ``dto`` onto a checked-out device."""
    sent = dto.model_fields_set

    if "id" in sent and dto.id is not None:
        device.id = dto.id
    if "name" in sent:
        device.name.name = dto.name or ""
    if "default_names" in sent:
        device.name.default_names = list(dto.default_names or [])
    if "nicknames" in sent:
        device.name.nicknames = list(dto.nicknames or [])
    if "type" in sent and dto.type is not None:
        device.type = as_enum(DeviceType, dto.type)
    if "room_hint" in sent:
        device.room_hint = dto.room_hint or None
    if "will_report_state" in sent and dto.will_report_state is not None:
        device.will_report_state = dto.will_report_state
    if "traits" in sent:
        device.traits = [trait.to_domain() for trait in dto.traits or []]
    if "custom_data" in sent:
        device.custom_data = dto.custom_data

    if sent.intersection(_DEVICE_INFO_FIELDS):
        current = device.device_info
        values = {
            field: (
                getattr(dto, field)
                if field in sent
                else getattr(current, field, None)
            )
            for field in _DEVICE_INFO_FIELDS
        }
        device.device_info = build_device_info(**values)


class GetDevicesUseCase:
    """Use case for listing the device catalog."""

    @inject
    def __init__(
        self,
        device_repository: IDeviceRepository = Provide["device_repository"],
    ):
        self.device_repository = device_repository

    async def execute(self) -> List[DeviceResponseDTO]:
        devices = await self.device_repository.get_all()
        return [DeviceResponseDTO.from_domain(device) for device in devices]


class GetDeviceByIdUseCase:
    """Use case for retrieving a device by id."""

    @inject
    def __init__(
        self,
        device_repository: IDeviceRepository = Provide["device_repository"],
    ):
        self.device_repository = device_repository

    async def execute(self, device_id: str) -> DeviceResponseDTO:
        """
        Retrieve a device.

        Raises:
            DeviceNotFoundError: If the device does not exist
        """
        device = await self.device_repository.get(device_id)
        return DeviceResponseDTO.from_domain(device)


class GetDeviceFormUseCase:
    """Use case for loading a device into the edit form."""

    @inject
    def __init__(
        self,
        device_repository: IDeviceRepository = Provide["device_repository"],
    ):
        self.device_repository = device_repository

    async def execute(self, device_id: str) -> DeviceFormDTO:
        device = await self.device_repository.get(device_id)
        return DeviceFormDTO.from_domain(device)


class CreateDeviceUseCase:
    """Use case for adding a device to the catalog."""

    @inject
    def __init__(
        self,
        device_repository: IDeviceRepository = Provide["device_repository"],
    ):
        self.device_repository = device_repository

    async def execute(self, dto: DeviceCreateDTO) -> DeviceResponseDTO:
        """
        Create a new device and persist the catalog.

        Args:
            dto: Device definition

        Returns:
            The created device

        Raises:
            DeviceValidationError: If the id is taken or the device is invalid
            DeviceStorageError: If the catalog cannot be persisted
        """
        device = _to_device(dto)

        async with self.device_repository.edit_session():
            taken = await self.device_repository.contains(device.id)
            try:
                ensure_device_is_valid(
                    device,
                    prior_errors=[DeviceConflictError.MESSAGE] if taken else (),
                )
            except DeviceValidationError as exc:
                logger.info(
                    "devices.create_rejected", device_id=device.id, errors=exc.errors
                )
                raise

            await self.device_repository.add(device)
            await self.device_repository.persist()

        logger.info("devices.created", device_id=device.id)
        return DeviceResponseDTO.from_domain(device)


class UpdateDeviceUseCase:
    """Use case for editing a device, including renaming it."""

    @inject
    def __init__(
        self,
        device_repository: IDeviceRepository = Provide["device_repository"],
        device_state: Optional[IDeviceStateRegistry] = None,
    ):
        self.device_repository = device_repository
        self.device_state = device_state

    async def execute(self, device_id: str, dto: DeviceUpdateDTO) -> DeviceResponseDTO:
        """
        Apply an edit and persist the catalog.

        Live state follows a renamed device to its new id.

        Raises:
            DeviceNotFoundError: If the device does not exist
            DeviceConflictError: If renaming onto an existing id
            DeviceValidationError: If the edited device is invalid
            DeviceStorageError: If the catalog cannot be persisted
        """
        async with self.device_repository.edit_session():
            device = await self.device_repository.get(device_id)
            _apply_update(device, dto)
            committed = await self.device_repository.update(
                device, original_id=device_id
            )
            if self.device_state is not None and committed.id != device_id:
                self.device_state.rename(device_id, committed.id)
            await self.device_repository.persist()

        logger.info("devices.updated", device_id=committed.id, original_id=device_id)
        return DeviceResponseDTO.from_domain(committed)


class DeleteDeviceUseCase:
    """Use case for removing a device and its live state from the catalog."""

    @inject
    def __init__(
        self,
        device_repository: IDeviceRepository = Provide["device_repository"],
        device_state: Optional[IDeviceStateRegistry] = None,
    ):
        self.device_repository = device_repository
        self.device_state = device_state

    async def execute(self, device_id: str) -> None:
        async with self.device_repository.edit_session():
            if not await self.device_repository.contains(device_id):
                raise DeviceNotFoundError(device_id)
            await self.device_repository.delete(device_id)
            if self.device_state is not None:
                self.device_state.remove(device_id)
            await self.device_repository.persist()

        logger.info("devices.deleted", device_id=device_id)
