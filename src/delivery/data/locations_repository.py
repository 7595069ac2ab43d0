"""Lookup helpers over the static location reference table."""

from __future__ import annotations

import dataclasses
import functools
import logging
from typing import Iterable, Iterator, Optional

from ..config import Settings, settings
from ..models.domain import PricingConfiguration, Region, Settlement
from .nigeria_locations import DEFAULT_PRICING, NIGERIA_REGIONS


class LocationTable:
    """Read-only view over regions keyed by exact region name."""

    def __init__(self, regions: Iterable[Region]) -> None:
        self._regions: dict[str, Region] = {}
        for region in regions:
            if region.name in self._regions:
                raise ValueError(f"Duplicate region '{region.name}' in location table.")
            self._regions[region.name] = region
        if not self._regions:
            raise ValueError("Location table must contain at least one region.")

    def __iter__(self) -> Iterator[Region]:
        return iter(self._regions.values())

    def __len__(self) -> int:
        return len(self._regions)

    def list_regions(self) -> tuple[str, ...]:
        return tuple(self._regions)

    def list_settlements(self, region_name: str) -> tuple[Settlement, ...]:
        region = self._regions.get(region_name)
        return region.settlements if region else ()

    def resolve_location(self, region_name: str, settlement_name: Optional[str] = None) -> Optional[Settlement]:
        """Resolve a destination to a settlement record, or ``None`` for an unknown region.

        Unlisted settlements fall back to the region's base distance: delivery is
        assumed to be available anywhere inside a known region.
        """
        region = self._regions.get(region_name)
        if region is None:
            return None

        if settlement_name:
            wanted = settlement_name.lower()
            for settlement in region.settlements:
                if settlement.name.lower() == wanted:
                    return settlement
            logging.debug(f"Settlement '{settlement_name}' not listed under '{region_name}', using base distance")

        return region.as_settlement()

    def is_serviceable(self, region_name: str, settlement_name: Optional[str] = None) -> bool:
        return self.resolve_location(region_name, settlement_name) is not None

    def available_locations(self) -> list[dict]:
        return [
            {
                "state": region.name,
                "cities": [settlement.name for settlement in region.settlements],
                "baseDistance": region.base_distance,
            }
            for region in self._regions.values()
        ]


@functools.lru_cache(maxsize=1)
def get_location_table() -> LocationTable:
    """Process-wide table built from the compiled-in Nigerian locations."""
    return LocationTable(NIGERIA_REGIONS)


def build_pricing(source: Settings | None = None) -> PricingConfiguration:
    """Default pricing with the per-deployment overrides from settings applied."""
    config = source or settings
    return dataclasses.replace(
        DEFAULT_PRICING,
        minimum_fee=config.minimum_fee,
        free_shipping_threshold=config.free_shipping_threshold,
    )
