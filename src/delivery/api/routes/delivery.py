"""Public delivery endpoints."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from ...errors import DeliveryError, InvalidInput
from ...schemas.delivery import (
    AvailabilityResponse,
    DeliveryQuoteModel,
    DeliveryQuoteResponse,
    DeliveryRequest,
    ErrorResponse,
    LocationModel,
    LocationsResponse,
)
from ...services.pricing.service import calculate_delivery_quote, check_availability, list_locations

router = APIRouter(prefix="/delivery", tags=["delivery"])

_ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@router.post(
    "/calculate",
    response_model=DeliveryQuoteResponse,
    status_code=status.HTTP_200_OK,
    responses=_ERROR_RESPONSES,
)
def calculate(payload: DeliveryRequest):
    """Calculate delivery cost and time for a location with speed options."""
    try:
        outcome = calculate_delivery_quote(payload)
    except InvalidInput as exc:
        return _error(exc.status_code, exc.message)
    except Exception as exc:
        logging.exception(f"Delivery calculation error: {exc}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to calculate delivery cost")

    if not outcome.success:
        error: DeliveryError = outcome.error
        return _error(error.status_code, error.message)

    return DeliveryQuoteResponse(data=DeliveryQuoteModel.from_quote(outcome.quote))


@router.get(
    "/locations",
    response_model=LocationsResponse,
    status_code=status.HTTP_200_OK,
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)
def locations():
    """List every state the store delivers to, with its cities."""
    try:
        data = [LocationModel(**location) for location in list_locations()]
    except Exception as exc:
        logging.exception(f"Error fetching locations: {exc}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch delivery locations")
    return LocationsResponse(data=data)


def _availability(state: str, city: Optional[str]):
    try:
        result = check_availability(state, city)
    except Exception as exc:
        logging.exception(f"Error checking delivery availability: {exc}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to check delivery availability")
    return AvailabilityResponse(**result)


@router.get("/check/{state}", response_model=AvailabilityResponse, status_code=status.HTTP_200_OK)
def check_state(state: str):
    """Check if delivery is available to a state."""
    return _availability(state, None)


@router.get("/check/{state}/{city}", response_model=AvailabilityResponse, status_code=status.HTTP_200_OK)
def check_city(state: str, city: str):
    """Check if delivery is available to a city within a state."""
    return _availability(state, city)
