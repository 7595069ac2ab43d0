"""Domain models for locations, pricing configuration and delivery quotes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Hashable, Optional

from ..errors import DeliveryError


@dataclass(frozen=True, slots=True)
class Settlement:
    """A city or locality with its road distance from the hub in kilometres."""

    name: str
    distance: int


@dataclass(frozen=True, slots=True)
class Region:
    """An administrative region (a state) with its settlements."""

    name: str
    base_distance: int
    settlements: tuple[Settlement, ...] = ()

    def as_settlement(self) -> Settlement:
        """Synthetic record used when no settlement is given or matched."""
        return Settlement(name=self.name, distance=self.base_distance)


@dataclass(frozen=True, slots=True)
class Zone:
    label: str
    max_distance: float
    rate: int
    flat: bool = False


@dataclass(frozen=True, slots=True)
class SpeedOption:
    key: str
    display_name: str
    description: str
    cost_multiplier: float
    min_days: int
    max_days: int
    is_default: bool = False


@dataclass(frozen=True, slots=True)
class DeliveryTimeBand:
    label: str
    max_distance: float
    standard_days: int


@dataclass(frozen=True, slots=True)
class PricingConfiguration:
    """Immutable pricing and timing policy injected into the delivery engine."""

    base_rate_per_km: int
    minimum_fee: int
    free_shipping_threshold: int
    hub_zone: Zone
    zones: tuple[Zone, ...]
    speed_options: tuple[SpeedOption, ...]
    delivery_time_bands: tuple[DeliveryTimeBand, ...]

    def __post_init__(self) -> None:
        if not self.zones:
            raise ValueError("Pricing configuration requires at least one distance zone.")
        if not self.delivery_time_bands:
            raise ValueError("Pricing configuration requires at least one delivery time band.")
        defaults = [option.key for option in self.speed_options if option.is_default]
        if len(defaults) != 1:
            raise ValueError(
                f"Pricing configuration must have exactly one default speed option, found {len(defaults)}."
            )

    @property
    def default_speed(self) -> SpeedOption:
        return next(option for option in self.speed_options if option.is_default)

    def speed_option(self, key: Optional[str]) -> SpeedOption:
        """Return the option for ``key``, falling back to the default tier."""
        for option in self.speed_options:
            if option.key == key:
                return option
        return self.default_speed


@dataclass(frozen=True, slots=True)
class DeliveryTimeEstimate:
    days_min: int
    days_max: int
    display_text: str


@dataclass(frozen=True, slots=True)
class DeliveryDates:
    min_date: datetime
    max_date: datetime
    estimated_date: datetime


@dataclass(frozen=True, slots=True)
class TierOption:
    tier: str
    name: str
    description: str
    cost: int
    original_cost: int
    is_free: bool
    day_range_text: str
    days_min: int
    days_max: int
    is_default: bool


@dataclass(frozen=True, slots=True)
class RouteHop:
    location: str
    distance: int


@dataclass(frozen=True, slots=True)
class Destination:
    region: str
    settlement: str
    distance_km: int


@dataclass(frozen=True, slots=True)
class DeliveryQuote:
    """Full cost/time quote for one destination."""

    destination: Destination
    selected_tier: str
    cost: int
    original_cost: int
    is_free_shipping: bool
    free_shipping_threshold: int
    delivery_time: DeliveryTimeEstimate
    options: tuple[TierOption, ...]
    min_delivery_date: datetime
    max_delivery_date: datetime
    estimated_delivery_date: datetime
    route: tuple[RouteHop, ...]

    @property
    def distance(self) -> int:
        return self.destination.distance_km

    def option_for(self, tier: str) -> Optional[TierOption]:
        return next((option for option in self.options if option.tier == tier), None)


@dataclass(frozen=True, slots=True)
class DeliveryOutcome:
    """Tagged success/failure result returned by the engine."""

    quote: Optional[DeliveryQuote] = None
    error: Optional[DeliveryError] = None

    @property
    def success(self) -> bool:
        return self.error is None and self.quote is not None

    @classmethod
    def ok(cls, quote: DeliveryQuote) -> "DeliveryOutcome":
        return cls(quote=quote)

    @classmethod
    def failed(cls, error: DeliveryError) -> "DeliveryOutcome":
        return cls(error=error)


@dataclass(slots=True)
class ShortestPath:
    path: list[Hashable] = field(default_factory=list)
    distance: float = math.inf

    @property
    def is_reachable(self) -> bool:
        return not math.isinf(self.distance)
