"""Delivery pricing services."""

from .engine import DeliveryEngine
from .pathfinding import find_shortest_path
from .service import (
    calculate_delivery_quote,
    check_availability,
    get_engine,
    list_locations,
    order_delivery_fields,
)

__all__ = [
    "DeliveryEngine",
    "find_shortest_path",
    "get_engine",
    "calculate_delivery_quote",
    "list_locations",
    "check_availability",
    "order_delivery_fields",
]
