"""
Fulfillment Use Case - Application Layer

Parses a fulfillment request into an intent, dispatches it to the handler
registered for its kind and wraps the result in the response envelope.
"""

from typing import Any, Callable, Dict, List, Mapping, Optional

from dependency_injector.wiring import Provide, inject

from homegraph_bridge.application.dtos.fulfillment_dto import (
    ErrorPayloadDTO,
    FulfillmentInputDTO,
    FulfillmentRequestDTO,
    FulfillmentResponseDTO,
    QueryPayloadDTO,
    SyncPayloadDTO,
)
from homegraph_bridge.application.use_cases.intent_handlers import IIntentHandler
from homegraph_bridge.domain.entities.errors import AttributeCollisionError
from homegraph_bridge.domain.entities.intents import (
    DisconnectIntent,
    EmptyResponsePayload,
    ErrorResponsePayload,
    ExecuteIntent,
    Intent,
    IntentType,
    ProtocolErrorCode,
    QueryDeviceRef,
    QueryIntent,
    QueryResponsePayload,
    ResponsePayload,
    SyncIntent,
    SyncResponsePayload,
)
from homegraph_bridge.shared import get_logger


def _parse_query(payload: Dict[str, Any]) -> QueryIntent:
    return QueryIntent(
        devices=[
            QueryDeviceRef(id=device["id"], custom_data=device.get("customData"))
            for device in payload.get("devices") or []
            if isinstance(device, dict) and "id" in device
        ]
    )


def _parse_execute(payload: Dict[str, Any]) -> ExecuteIntent:
    return ExecuteIntent(commands=list(payload.get("commands") or []))


_INTENT_PARSERS: Dict[IntentType, Callable[[Dict[str, Any]], Intent]] = {
    IntentType.SYNC: lambda payload: SyncIntent(),
    IntentType.QUERY: _parse_query,
    IntentType.EXECUTE: _parse_execute,
    IntentType.DISCONNECT: lambda payload: DisconnectIntent(),
}


def parse_intent(request_input: FulfillmentInputDTO) -> Optional[Intent]:
    """Build the intent for one request input, ``None`` if the kind is unknown."""
    try:
        intent_type = IntentType(request_input.intent)
    except ValueError:
        return None
    return _INTENT_PARSERS[intent_type](request_input.payload)


def payload_to_dict(payload: ResponsePayload) -> Dict[str, Any]:
    if isinstance(payload, SyncResponsePayload):
        return SyncPayloadDTO.from_domain(payload).to_payload()
    if isinstance(payload, QueryResponsePayload):
        return QueryPayloadDTO.from_domain(payload).to_payload()
    if isinstance(payload, ErrorResponsePayload):
        return ErrorPayloadDTO.from_domain(payload).to_payload()
    return {}


class FulfillmentUseCase:
    """Dispatches fulfillment requests to the registered intent handlers."""

    @inject
    def __init__(
        self,
        handlers: Mapping[IntentType, IIntentHandler] = Provide["intent_handlers"],
        logger: Optional[Any] = None,
    ):
        self._handlers = {
            getattr(key, "value", key): handler for key, handler in handlers.items()
        }
        self._logger = logger or get_logger(__name__)

    @property
    def supported_intents(self) -> List[str]:
        return list(self._handlers)

    async def execute(self, request: FulfillmentRequestDTO) -> Dict[str, Any]:
        """
        Fulfill a request.

        Args:
            request: Parsed fulfillment request

        Returns:
            The response body: ``{"requestId", "payload"}``, or an empty
            mapping for DISCONNECT

        Raises:
            DeviceStorageError: If the device catalog is unavailable
        """
        request_input = request.inputs[0]
        intent = parse_intent(request_input)

        if intent is None:
            self._logger.warning(
                "fulfillment.unknown_intent",
                request_id=request.request_id,
                intent=request_input.intent,
            )
            payload: ResponsePayload = ErrorResponsePayload(
                error_code=ProtocolErrorCode.PROTOCOL_ERROR,
                debug_string=f"Unknown intent {request_input.intent}",
            )
        else:
            payload = await self._dispatch(request.request_id, intent)

        if isinstance(payload, EmptyResponsePayload):
            return {}

        return FulfillmentResponseDTO(
            request_id=request.request_id, payload=payload_to_dict(payload)
        ).model_dump(by_alias=True)

    async def _dispatch(self, request_id: str, intent: Intent) -> ResponsePayload:
        intent_type = intent.intent_type
        handler = self._handlers.get(intent_type.value)

        if handler is None:
            self._logger.info(
                "fulfillment.intent_not_supported",
                request_id=request_id,
                intent=intent_type.value,
            )
            return ErrorResponsePayload(
                error_code=ProtocolErrorCode.NOT_SUPPORTED,
                debug_string=f"{intent_type.value} is not supported",
            )

        self._logger.debug(
            "fulfillment.dispatch", request_id=request_id, intent=intent_type.value
        )
        try:
            return await handler.handle(intent)
        except AttributeCollisionError as exc:
            self._logger.error(
                "fulfillment.attribute_collision",
                request_id=request_id,
                error=exc.message,
                details=exc.details,
            )
            return ErrorResponsePayload(
                error_code=ProtocolErrorCode.PROTOCOL_ERROR,
                debug_string=exc.message,
            )
