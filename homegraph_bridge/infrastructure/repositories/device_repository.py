"""
Device Repository - Infrastructure Layer

In-memory device catalog backed by an :class:`IDeviceStore`. Reads are
served from memory as deep copies; writes are serialized by an asyncio
lock and only reach the store when ``persist`` is called.
"""

from __future__ import annotations

import asyncio
import copy
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional

from homegraph_bridge.domain.entities.device import Device
from homegraph_bridge.domain.entities.errors import (
    DeviceConflictError,
    DeviceNotFoundError,
    DeviceStorageError,
)
from homegraph_bridge.domain.ports.device_store import IDeviceStore
from homegraph_bridge.domain.repositories.device_repository import IDeviceRepository
from homegraph_bridge.domain.services.device_validator import (
    ensure_device_is_valid,
    validate_device,
)
from homegraph_bridge.infrastructure.stores.device_document import (
    to_document,
    to_entity,
)
from homegraph_bridge.shared import get_logger


class DeviceRepository(IDeviceRepository):
    """Device catalog kept in memory and written through a device store."""

    def __init__(self, store: IDeviceStore, logger: Optional[Any] = None) -> None:
        """
        Initialize the repository.

        Args:
            store: Durable store the catalog is loaded from and persisted to
            logger: structlog logger, defaults to the module logger
        """
        self._store = store
        self._logger = logger or get_logger(__name__)
        self._devices: Dict[str, Device] = {}
        self._lock = asyncio.Lock()
        self._lock_owner: Optional[asyncio.Task] = None

    @asynccontextmanager
    async def _write_lock(self) -> AsyncIterator[None]:
        task = asyncio.current_task()
        if self._lock_owner is not None and self._lock_owner is task:
            yield
            return

        async with self._lock:
            self._lock_owner = task
            try:
                yield
            finally:
                self._lock_owner = None

    def edit_session(self):
        return self._write_lock()

    async def get_all(self) -> List[Device]:
        return [copy.deepcopy(device) for device in self._devices.values()]

    async def get(self, device_id: str) -> Device:
        device = self._devices.get(device_id)
        if device is None:
            raise DeviceNotFoundError(device_id)
        return copy.deepcopy(device)

    async def contains(self, device_id: str) -> bool:
        return device_id in self._devices

    async def count(self) -> int:
        return len(self._devices)

    async def add(self, device: Device) -> None:
        async with self._write_lock():
            if device.id in self._devices:
                raise DeviceConflictError(device.id)
            self._devices[device.id] = copy.deepcopy(device)

        self._logger.debug("device_repository.added", device_id=device.id)

    async def update(self, device: Device, original_id: Optional[str] = None) -> Device:
        original_id = original_id or device.id

        async with self._write_lock():
            if original_id not in self._devices:
                raise DeviceNotFoundError(original_id)

            renamed = device.id != original_id
            conflict = renamed and device.id in self._devices
            if conflict and not validate_device(device):
                raise DeviceConflictError(device.id)
            ensure_device_is_valid(
                device,
                prior_errors=[DeviceConflictError.MESSAGE] if conflict else (),
            )

            committed = copy.deepcopy(device)
            if not renamed:
                self._devices[device.id] = committed
            else:
                # Rebuild so the renamed device keeps its position.
                self._devices = {
                    (device.id if key == original_id else key): (
                        committed if key == original_id else value
                    )
                    for key, value in self._devices.items()
                }

        self._logger.debug(
            "device_repository.updated",
            device_id=device.id,
            original_id=original_id,
        )
        return copy.deepcopy(committed)

    async def delete(self, device_id: str) -> None:
        async with self._write_lock():
            if device_id not in self._devices:
                raise DeviceNotFoundError(device_id)
            del self._devices[device_id]

        self._logger.debug("device_repository.deleted", device_id=device_id)

    async def persist(self) -> None:
        async with self._write_lock():
            documents = [to_document(device) for device in self._devices.values()]
            try:
                await asyncio.to_thread(self._store.save, documents)
            except Exception as exc:
                self._logger.error(
                    "device_repository.persist_failed",
                    store=repr(self._store),
                    error=str(exc),
                )
                raise DeviceStorageError(
                    "Failed to persist the device catalog",
                    details={"error": str(exc)},
                ) from exc

        self._logger.info("device_repository.persisted", count=len(documents))

    async def load(self) -> None:
        async with self._write_lock():
            try:
                documents = await asyncio.to_thread(self._store.load)
                loaded = [to_entity(document) for document in documents]
            except Exception as exc:
                self._logger.error(
                    "device_repository.load_failed",
                    store=repr(self._store),
                    error=str(exc),
                )
                raise DeviceStorageError(
                    "Failed to load the device catalog",
                    details={"error": str(exc)},
                ) from exc

            devices: Dict[str, Device] = {}
            for device in loaded:
                if device.id in devices:
                    self._logger.warning(
                        "device_repository.duplicate_id", device_id=device.id
                    )
                    continue
                devices[device.id] = device
            self._devices = devices

        self._logger.info("device_repository.loaded", count=len(devices))
