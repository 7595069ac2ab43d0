"""Delivery orchestration used by the API and by order finalization."""

from __future__ import annotations

import functools
import logging
from typing import Optional

from ...config import settings
from ...data.locations_repository import build_pricing, get_location_table
from ...errors import InvalidInput
from ...models.domain import DeliveryOutcome
from ...schemas.delivery import DeliveryRequest
from .engine import DeliveryEngine

AVAILABLE_MESSAGE = "Delivery is available to this location"
UNAVAILABLE_MESSAGE = "Delivery is not available to this location"


@functools.lru_cache(maxsize=1)
def get_engine() -> DeliveryEngine:
    """Process-wide engine over the static table and configured pricing."""
    return DeliveryEngine(
        build_pricing(settings),
        get_location_table(),
        hub_name=settings.hub_name,
    )


def calculate_delivery_quote(payload: DeliveryRequest, engine: Optional[DeliveryEngine] = None) -> DeliveryOutcome:
    state = payload.state
    if not state or not state.strip():
        raise InvalidInput("State is required")

    engine = engine or get_engine()
    city = payload.city or None
    tier = payload.speed_option or engine.pricing.default_speed.key
    order_total = payload.order_total if payload.order_total is not None else 0
    outcome = engine.calculate_delivery(state, city, tier, order_total)
    if outcome.success:
        logging.info(
            f"Quoted delivery to '{state}', '{city}' ({outcome.quote.distance} km): "
            f"{outcome.quote.selected_tier} {outcome.quote.cost}"
        )
    return outcome


def list_locations(engine: Optional[DeliveryEngine] = None) -> list[dict]:
    engine = engine or get_engine()
    return engine.locations.available_locations()


def check_availability(state: str, city: Optional[str] = None, engine: Optional[DeliveryEngine] = None) -> dict:
    engine = engine or get_engine()
    available = engine.locations.is_serviceable(state, city)
    return {
        "available": available,
        "message": AVAILABLE_MESSAGE if available else UNAVAILABLE_MESSAGE,
    }


def order_delivery_fields(
    state: str,
    city: Optional[str],
    order_subtotal: float,
    engine: Optional[DeliveryEngine] = None,
) -> dict:
    """Delivery fields persisted on an order when checkout is finalized.

    Always priced at the default (standard) tier. Raises ``LocationNotFound``
    for an unknown shipping state and re-raises any other engine failure.
    """
    engine = engine or get_engine()
    outcome = engine.calculate_delivery(state, city, engine.pricing.default_speed.key, order_subtotal)
    if not outcome.success:
        raise outcome.error

    quote = outcome.quote
    return {
        "deliveryCost": quote.cost,
        "isFreeShipping": quote.is_free_shipping,
        "deliveryTime": quote.delivery_time.display_text,
        "estimatedDeliveryDate": quote.estimated_delivery_date,
        "customerLocation": {
            "state": state,
            "city": city or state,
            "distance": quote.distance,
        },
    }
