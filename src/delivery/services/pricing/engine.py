"""Distance/zone based delivery pricing and delivery time estimation."""

from __future__ import annotations

import logging
import math
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from ...errors import ComputationError, LocationNotFound
from ...models.domain import (
    DeliveryDates,
    DeliveryOutcome,
    DeliveryQuote,
    DeliveryTimeEstimate,
    Destination,
    PricingConfiguration,
    RouteHop,
    TierOption,
)
from ...data.locations_repository import LocationTable


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _days_text(days_min: int, days_max: int) -> str:
    if days_min == days_max:
        return f"{days_min} day" if days_min == 1 else f"{days_min} days"
    return f"{days_min}-{days_max} days"


class DeliveryEngine:
    """Turns a destination, a speed tier and an order subtotal into a delivery quote.

    Every operation is a pure function of its arguments, the injected pricing
    configuration and location table, and the clock (for date projection only).
    """

    def __init__(
        self,
        pricing: PricingConfiguration,
        locations: LocationTable,
        *,
        hub_name: str = "Lagos",
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.pricing = pricing
        self.locations = locations
        self.hub_name = hub_name
        self.clock = clock

    def compute_base_cost(self, distance_km: float) -> int:
        hub_zone = self.pricing.hub_zone
        if distance_km <= hub_zone.max_distance:
            return hub_zone.rate

        # open-ended top zone when the distance exceeds every ceiling
        zone = next(
            (candidate for candidate in self.pricing.zones if distance_km <= candidate.max_distance),
            self.pricing.zones[-1],
        )
        cost = zone.rate if zone.flat else distance_km * zone.rate
        return int(max(cost, self.pricing.minimum_fee))

    def compute_cost_for_tier(self, distance_km: float, tier: Optional[str]) -> int:
        option = self.pricing.speed_option(tier)
        return _round_half_up(self.compute_base_cost(distance_km) * option.cost_multiplier)

    def is_free_shipping_applicable(self, order_subtotal: float) -> bool:
        return order_subtotal >= self.pricing.free_shipping_threshold

    def list_all_tier_options(self, distance_km: float, order_subtotal: float = 0) -> list[TierOption]:
        is_free = self.is_free_shipping_applicable(order_subtotal)
        options: list[TierOption] = []
        for speed in self.pricing.speed_options:
            original_cost = self.compute_cost_for_tier(distance_km, speed.key)
            estimate = self.estimate_delivery_time(distance_km, speed.key)
            options.append(
                TierOption(
                    tier=speed.key,
                    name=speed.display_name,
                    description=speed.description,
                    cost=0 if is_free else original_cost,
                    original_cost=original_cost,
                    is_free=is_free,
                    day_range_text=estimate.display_text,
                    days_min=estimate.days_min,
                    days_max=estimate.days_max,
                    is_default=speed.is_default,
                )
            )
        return options

    def estimate_delivery_time(self, distance_km: float, tier: Optional[str] = "standard") -> DeliveryTimeEstimate:
        bands = self.pricing.delivery_time_bands
        band = next((candidate for candidate in bands if distance_km <= candidate.max_distance), bands[-1])
        base = band.standard_days

        # Tier adjustments are fixed policy, independent of the speed option's advertised days.
        if tier == "economy":
            days_min, days_max = base + 2, base + 3
        elif tier == "express":
            days_min = max(1, math.floor(base / 2))
            days_max = max(1, math.ceil(base / 1.5))
        else:
            days_min, days_max = base, base + 1

        return DeliveryTimeEstimate(days_min=days_min, days_max=days_max, display_text=_days_text(days_min, days_max))

    def project_delivery_dates(
        self,
        distance_km: float,
        tier: Optional[str] = "standard",
        now: Optional[datetime] = None,
    ) -> DeliveryDates:
        start = now or self.clock()
        estimate = self.estimate_delivery_time(distance_km, tier)
        min_date = start + timedelta(days=estimate.days_min)
        max_date = start + timedelta(days=estimate.days_max)
        return DeliveryDates(min_date=min_date, max_date=max_date, estimated_date=max_date)

    def calculate_delivery(
        self,
        region: str,
        settlement: Optional[str] = None,
        tier: Optional[str] = "standard",
        order_subtotal: float = 0,
    ) -> DeliveryOutcome:
        try:
            location = self.locations.resolve_location(region, settlement)
            if location is None:
                logging.info(f"Delivery requested for unknown location '{region}', '{settlement}'")
                return DeliveryOutcome.failed(LocationNotFound(region, settlement))

            distance = location.distance
            options = self.list_all_tier_options(distance, order_subtotal)
            selected = next((option for option in options if option.tier == tier), None)
            if selected is None:
                selected = next(option for option in options if option.is_default)

            dates = self.project_delivery_dates(distance, selected.tier)
            destination_name = settlement or region
            quote = DeliveryQuote(
                destination=Destination(region=region, settlement=destination_name, distance_km=distance),
                selected_tier=selected.tier,
                cost=selected.cost,
                original_cost=selected.original_cost,
                is_free_shipping=selected.is_free,
                free_shipping_threshold=self.pricing.free_shipping_threshold,
                delivery_time=self.estimate_delivery_time(distance, selected.tier),
                options=tuple(options),
                min_delivery_date=dates.min_date,
                max_delivery_date=dates.max_date,
                estimated_delivery_date=dates.estimated_date,
                route=(
                    RouteHop(location=f"{self.hub_name} (Hub)", distance=0),
                    RouteHop(location=destination_name, distance=distance),
                ),
            )
            return DeliveryOutcome.ok(quote)
        except Exception as exc:
            logging.exception(f"Delivery calculation failed for '{region}', '{settlement}': {exc}")
            return DeliveryOutcome.failed(ComputationError("Failed to calculate delivery cost"))
