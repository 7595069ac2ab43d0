from datetime import datetime, timedelta

import pytest

from src.delivery.errors import InvalidInput, LocationNotFound
from src.delivery.schemas.delivery import DeliveryRequest
from src.delivery.services.pricing import service as delivery_service
from src.delivery.services.pricing.engine import DeliveryEngine


def test_calculate_delivery_quote_requires_state(engine: DeliveryEngine):
    with pytest.raises(InvalidInput) as excinfo:
        delivery_service.calculate_delivery_quote(DeliveryRequest(city="Lekki"), engine=engine)

    assert excinfo.value.message == "State is required"
    assert excinfo.value.status_code == 400


def test_calculate_delivery_quote_reads_aliases(engine: DeliveryEngine):
    payload = DeliveryRequest.model_validate(
        {"state": "Oyo", "city": "Ibadan", "speedOption": "economy", "orderTotal": 20000}
    )

    outcome = delivery_service.calculate_delivery_quote(payload, engine=engine)

    assert outcome.success
    assert outcome.quote.selected_tier == "economy"
    assert outcome.quote.cost == 1050


def test_check_availability_messages(engine: DeliveryEngine):
    assert delivery_service.check_availability("Kaduna", "Zaria", engine=engine) == {
        "available": True,
        "message": "Delivery is available to this location",
    }
    assert delivery_service.check_availability("Atlantis", engine=engine)["available"] is False


def test_list_locations_uses_engine_table(engine: DeliveryEngine):
    locations = delivery_service.list_locations(engine=engine)

    assert [location["state"] for location in locations][:3] == ["Lagos", "Ogun", "Oyo"]


def test_order_delivery_fields(engine: DeliveryEngine, now: datetime):
    fields = delivery_service.order_delivery_fields("Rivers", "Port Harcourt", 20000, engine=engine)

    assert fields == {
        "deliveryCost": 3720,
        "isFreeShipping": False,
        "deliveryTime": "4-5 days",
        "estimatedDeliveryDate": now + timedelta(days=5),
        "customerLocation": {"state": "Rivers", "city": "Port Harcourt", "distance": 620},
    }


def test_order_delivery_fields_free_shipping_and_default_city(engine: DeliveryEngine):
    fields = delivery_service.order_delivery_fields("Ogun", None, 75000, engine=engine)

    assert fields["deliveryCost"] == 0
    assert fields["isFreeShipping"] is True
    assert fields["customerLocation"] == {"state": "Ogun", "city": "Ogun", "distance": 80}


def test_order_delivery_fields_unknown_state(engine: DeliveryEngine):
    with pytest.raises(LocationNotFound):
        delivery_service.order_delivery_fields("Atlantis", "Lost City", 1000, engine=engine)


def test_calculate_delivery_quote_matches_state_exactly(engine: DeliveryEngine):
    outcome = delivery_service.calculate_delivery_quote(DeliveryRequest(state=" Lagos "), engine=engine)

    assert outcome.success is False
    assert isinstance(outcome.error, LocationNotFound)

    with pytest.raises(InvalidInput):
        delivery_service.calculate_delivery_quote(DeliveryRequest(state="  "), engine=engine)


def test_calculate_delivery_quote_null_options_use_defaults(engine: DeliveryEngine):
    payload = DeliveryRequest.model_validate({"state": "Kano", "speedOption": None, "orderTotal": None})

    quote = delivery_service.calculate_delivery_quote(payload, engine=engine).quote

    assert quote.selected_tier == "standard"
    assert quote.cost == 8400
    assert quote.is_free_shipping is False
