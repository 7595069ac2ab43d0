from datetime import datetime, timezone

import pytest

from src.delivery.data.locations_repository import get_location_table
from src.delivery.data.nigeria_locations import DEFAULT_PRICING
from src.delivery.services.pricing.engine import DeliveryEngine

FIXED_NOW = datetime(2026, 1, 1, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def engine() -> DeliveryEngine:
    return DeliveryEngine(DEFAULT_PRICING, get_location_table(), clock=lambda: FIXED_NOW)


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW
