"""Delivery error taxonomy."""

from __future__ import annotations

from typing import Optional


class DeliveryError(Exception):
    """Base class for failures surfaced to delivery callers."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInput(DeliveryError):
    status_code = 400


class LocationNotFound(DeliveryError):
    status_code = 404

    def __init__(self, state: str, city: Optional[str] = None) -> None:
        self.state = state
        self.city = city
        suffix = f", {city}" if city else ""
        super().__init__(f"Location not found: {state}{suffix}")


class ComputationError(DeliveryError):
    """Unexpected failure while pricing a delivery; details stay in the logs."""

    status_code = 500
