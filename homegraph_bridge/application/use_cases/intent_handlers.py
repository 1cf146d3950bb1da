"""
Intent Handlers - Application Layer

One handler per fulfillment intent kind. Handlers take a parsed intent
and return a response payload; the fulfillment use case picks the handler
and wraps the payload in the protocol envelope.
"""

from typing import Any, Dict, Optional, Protocol

from homegraph_bridge.domain.entities.device import Device
from homegraph_bridge.domain.entities.errors import AttributeCollisionError
from homegraph_bridge.domain.entities.intents import (
    DisconnectIntent,
    EmptyResponsePayload,
    ProtocolErrorCode,
    QueryIntent,
    QueryResponsePayload,
    QueryStatus,
    SyncDevice,
    SyncIntent,
    SyncResponsePayload,
)
from homegraph_bridge.domain.ports.device_state import IDeviceStateProvider
from homegraph_bridge.domain.repositories.device_repository import IDeviceRepository
from homegraph_bridge.domain.services import merge_trait_attributes
from homegraph_bridge.shared import get_logger


class IIntentHandler(Protocol):
    """Turns one kind of intent into a response payload."""

    async def handle(self, intent: Any) -> Any:
        ...


class SyncIntentHandler:
    """Reports every catalog device and its capabilities."""

    def __init__(
        self,
        device_repository: IDeviceRepository,
        agent_user_id: Optional[str] = None,
        strict_attribute_merge: bool = False,
        logger: Optional[Any] = None,
    ) -> None:
        self._device_repository = device_repository
        self._agent_user_id = agent_user_id or ""
        self._strict_attribute_merge = strict_attribute_merge
        self._logger = logger or get_logger(__name__)

    async def handle(self, intent: SyncIntent) -> SyncResponsePayload:
        devices = await self._device_repository.get_all()
        synced = [self._to_sync_device(device) for device in devices]

        self._logger.info(
            "sync.completed",
            agent_user_id=self._agent_user_id,
            device_count=len(synced),
        )
        return SyncResponsePayload(agent_user_id=self._agent_user_id, devices=synced)

    def _to_sync_device(self, device: Device) -> SyncDevice:
        merged = merge_trait_attributes(device.traits)

        for collision in merged.collisions:
            if self._strict_attribute_merge:
                raise AttributeCollisionError(
                    device.id, collision.attribute, collision.traits
                )
            self._logger.warning(
                "sync.attribute_collision",
                device_id=device.id,
                attribute=collision.attribute,
                traits=collision.traits,
            )

        return SyncDevice(
            id=device.id,
            type=device.type,
            traits=device.trait_types(),
            name=device.name,
            will_report_state=device.will_report_state,
            attributes=merged.attributes,
            room_hint=device.room_hint,
            device_info=device.device_info,
            custom_data=device.custom_data,
        )


class QueryIntentHandler:
    """Answers QUERY with the last known state of each requested device."""

    def __init__(
        self,
        device_repository: IDeviceRepository,
        state_provider: IDeviceStateProvider,
        logger: Optional[Any] = None,
    ) -> None:
        self._device_repository = device_repository
        self._state_provider = state_provider
        self._logger = logger or get_logger(__name__)

    async def handle(self, intent: QueryIntent) -> QueryResponsePayload:
        devices: Dict[str, Dict[str, Any]] = {}

        for ref in intent.devices:
            if not await self._device_repository.contains(ref.id):
                devices[ref.id] = {
                    "status": QueryStatus.ERROR.value,
                    "errorCode": ProtocolErrorCode.DEVICE_NOT_FOUND.value,
                }
                continue

            state = self._state_provider.get_state(ref.id)
            if state is None:
                devices[ref.id] = {
                    "online": False,
                    "status": QueryStatus.OFFLINE.value,
                }
            else:
                devices[ref.id] = {
                    "online": True,
                    "status": QueryStatus.SUCCESS.value,
                    **state,
                }

        self._logger.info("query.completed", device_count=len(devices))
        return QueryResponsePayload(devices=devices)


class DisconnectIntentHandler:
    """Acknowledges an account unlink."""

    def __init__(self, logger: Optional[Any] = None) -> None:
        self._logger = logger or get_logger(__name__)

    async def handle(self, intent: DisconnectIntent) -> EmptyResponsePayload:
        self._logger.info("disconnect.received")
        return EmptyResponsePayload()
