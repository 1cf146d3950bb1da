"""
Domain Errors

Exceptions raised by the device catalog and the intent pipeline. Every
error carries a human readable message plus an optional ``details``
mapping that controllers forward to API clients.
"""

from typing import Any, Dict, List, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class DeviceNotFoundError(DomainError):
    """Raised when a device id is not in the catalog."""

    def __init__(self, device_id: str, details: Optional[Dict[str, Any]] = None):
        self.device_id = device_id
        message = f"Device with ID {device_id} not found"
        super().__init__(message, details)


class DeviceConflictError(DomainError):
    """Raised when adding a device whose id is already taken."""

    MESSAGE = "Device Id already exists"

    def __init__(self, device_id: str, details: Optional[Dict[str, Any]] = None):
        self.device_id = device_id
        super().__init__(self.MESSAGE, {"device_id": device_id, **(details or {})})


class DeviceValidationError(DomainError):
    """Raised when a device fails validation.

    The individual rule violations are available in ``details["errors"]``.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)

    @property
    def errors(self) -> List[str]:
        return list(self.details.get("errors", []))


class DeviceStorageError(DomainError):
    """Raised when the device catalog cannot be loaded or persisted."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class AttributeCollisionError(DomainError):
    """Raised in strict merge mode when two traits declare the same attribute."""

    def __init__(
        self,
        device_id: str,
        attribute: str,
        traits: List[str],
        details: Optional[Dict[str, Any]] = None,
    ):
        message = (
            f"Attribute '{attribute}' of device {device_id} is declared by "
            f"more than one trait: {', '.join(traits)}"
        )
        super().__init__(
            message,
            {
                "device_id": device_id,
                "attribute": attribute,
                "traits": traits,
                **(details or {}),
            },
        )
