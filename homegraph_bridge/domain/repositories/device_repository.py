"""
Device Repository Interface

The repository owns the authoritative device catalog. Reads hand out
copies; writes go through ``add``, ``update`` and ``delete`` and only become
durable once ``persist`` is called.
"""

from abc import ABC, abstractmethod
from typing import AsyncContextManager, List, Optional

from homegraph_bridge.domain.entities.device import Device


class IDeviceRepository(ABC):
    """Interface for device catalog implementations."""

    @abstractmethod
    async def get_all(self) -> List[Device]:
        """
        Return every device, in insertion order.

        Returns:
            Copies of the stored devices
        """
        pass

    @abstractmethod
    async def get(self, device_id: str) -> Device:
        """
        Check out a device for reading or editing.

        Args:
            device_id: Id of the device

        Returns:
            A copy of the stored device; changes only take effect via update

        Raises:
            DeviceNotFoundError: If no device has this id
        """
        pass

    @abstractmethod
    async def contains(self, device_id: str) -> bool:
        """Tell whether a device with this id exists."""
        pass

    @abstractmethod
    async def add(self, device: Device) -> None:
        """
        Insert a new device. Callers validate beforehand.

        Raises:
            DeviceConflictError: If the id is already used
        """
        pass

    @abstractmethod
    async def update(self, device: Device, original_id: Optional[str] = None) -> Device:
        """
        Commit an edited device.

        Args:
            device: The edited copy
            original_id: Id the device was checked out with, when it was renamed

        Returns:
            The committed device

        Raises:
            DeviceNotFoundError: If the original device does not exist
            DeviceConflictError: If renaming onto an existing id
            DeviceValidationError: If the edited device is invalid
        """
        pass

    @abstractmethod
    async def delete(self, device_id: str) -> None:
        """
        Remove a device.

        Raises:
            DeviceNotFoundError: If no device has this id
        """
        pass

    @abstractmethod
    async def persist(self) -> None:
        """
        Durably write the current catalog.

        Raises:
            DeviceStorageError: If the store cannot be written
        """
        pass

    @abstractmethod
    async def load(self) -> None:
        """
        Replace the in-memory catalog with the durable one.

        Raises:
            DeviceStorageError: If the store cannot be read
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Number of devices in the catalog."""
        pass

    @abstractmethod
    def edit_session(self) -> AsyncContextManager[None]:
        """
        Exclusive section for a checkout, mutate, commit and persist cycle.

        Other writers wait until the session ends. Repository writes made by
        the task owning the session do not block.
        """
        pass
