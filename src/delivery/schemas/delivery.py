"""Delivery request/response schemas."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.domain import DeliveryQuote, TierOption


class DeliveryRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # optional here so a missing state is reported as a 400, not a validation error
    state: Optional[str] = None
    city: Optional[str] = None
    # null falls back to the default tier and a zero subtotal
    speed_option: Optional[str] = Field(default="standard", alias="speedOption")
    order_total: Optional[float] = Field(default=0, ge=0, alias="orderTotal")


class DeliveryOptionModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: str
    cost: int
    original_cost: int = Field(alias="originalCost")
    is_free: bool = Field(alias="isFree")
    delivery_days: str = Field(alias="deliveryDays")
    days_min: int = Field(alias="daysMin")
    days_max: int = Field(alias="daysMax")
    is_default: bool = Field(alias="isDefault")

    @classmethod
    def from_option(cls, option: TierOption) -> "DeliveryOptionModel":
        return cls(
            id=option.tier,
            name=option.name,
            description=option.description,
            cost=option.cost,
            original_cost=option.original_cost,
            is_free=option.is_free,
            delivery_days=option.day_range_text,
            days_min=option.days_min,
            days_max=option.days_max,
            is_default=option.is_default,
        )


class RouteHopModel(BaseModel):
    location: str
    distance: int


class DeliveryQuoteModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    state: str
    city: str
    distance: int
    delivery_cost: int = Field(alias="deliveryCost")
    original_cost: int = Field(alias="originalCost")
    is_free_shipping: bool = Field(alias="isFreeShipping")
    free_shipping_threshold: int = Field(alias="freeShippingThreshold")
    selected_speed: str = Field(alias="selectedSpeed")
    delivery_time: str = Field(alias="deliveryTime")
    delivery_days: int = Field(alias="deliveryDays")
    estimated_delivery_date: datetime = Field(alias="estimatedDeliveryDate")
    min_delivery_date: datetime = Field(alias="minDeliveryDate")
    max_delivery_date: datetime = Field(alias="maxDeliveryDate")
    delivery_options: List[DeliveryOptionModel] = Field(alias="deliveryOptions")
    route: List[RouteHopModel]

    @classmethod
    def from_quote(cls, quote: DeliveryQuote) -> "DeliveryQuoteModel":
        return cls(
            state=quote.destination.region,
            city=quote.destination.settlement,
            distance=quote.distance,
            delivery_cost=quote.cost,
            original_cost=quote.original_cost,
            is_free_shipping=quote.is_free_shipping,
            free_shipping_threshold=quote.free_shipping_threshold,
            selected_speed=quote.selected_tier,
            delivery_time=quote.delivery_time.display_text,
            delivery_days=quote.delivery_time.days_max,
            estimated_delivery_date=quote.estimated_delivery_date,
            min_delivery_date=quote.min_delivery_date,
            max_delivery_date=quote.max_delivery_date,
            delivery_options=[DeliveryOptionModel.from_option(option) for option in quote.options],
            route=[RouteHopModel(location=hop.location, distance=hop.distance) for hop in quote.route],
        )


class DeliveryQuoteResponse(BaseModel):
    success: bool = True
    data: DeliveryQuoteModel


class LocationModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    state: str
    cities: List[str]
    base_distance: int = Field(alias="baseDistance")


class LocationsResponse(BaseModel):
    success: bool = True
    data: List[LocationModel]


class AvailabilityResponse(BaseModel):
    success: bool = True
    available: bool
    message: str


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
