"""
Fulfillment Router - Presentation Layer

Webhook called by the assistant for SYNC, QUERY, EXECUTE and DISCONNECT.
"""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from homegraph_bridge.application.dtos.fulfillment_dto import FulfillmentRequestDTO
from homegraph_bridge.application.use_cases.fulfillment_use_case import (
    FulfillmentUseCase,
)
from homegraph_bridge.domain.entities.errors import DeviceStorageError
from homegraph_bridge.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Fulfillment"])


@router.post(
    "/smarthome",
    response_model=None,
    responses={
        200: {
            "description": "Protocol response envelope, or an empty object "
            "for DISCONNECT"
        }
    },
)
@inject
async def fulfill(
    request: FulfillmentRequestDTO,
    fulfillment_use_case: FulfillmentUseCase = Depends(
        Provide["fulfillment_use_case"]
    ),
) -> JSONResponse:
    """Answer a fulfillment request with the protocol response body."""
    logger.debug(
        "fulfillment.request",
        request_id=request.request_id,
        intent=request.inputs[0].intent,
    )
    try:
        body = await fulfillment_use_case.execute(request)
    except DeviceStorageError as exc:
        logger.error(
            "fulfillment.storage_failure",
            request_id=request.request_id,
            error=str(exc),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Device catalog unavailable",
        ) from exc
    return JSONResponse(content=body)
