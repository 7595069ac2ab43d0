import pytest

from src.delivery.config import Settings
from src.delivery.data.locations_repository import build_pricing, get_location_table
from src.delivery.services.pricing.engine import DeliveryEngine


def test_settings_defaults_match_compiled_pricing():
    pricing = build_pricing(Settings())

    assert pricing.base_rate_per_km == 6
    assert pricing.minimum_fee == 1500
    assert pricing.free_shipping_threshold == 50000


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("HOS_MINIMUM_FEE", "2500")
    monkeypatch.setenv("HOS_FREE_SHIPPING_THRESHOLD", "30000")
    monkeypatch.setenv("HOS_LOG_LEVEL", "debug")
    monkeypatch.setenv("HOS_FRONTEND_ALLOWED_ORIGINS", '["https://houseofshirt.ng"]')

    config = Settings()
    engine = DeliveryEngine(build_pricing(config), get_location_table())

    assert config.log_level == "DEBUG"
    assert config.frontend_allowed_origins == ("https://houseofshirt.ng",)
    assert engine.compute_base_cost(250) == 2500
    assert engine.is_free_shipping_applicable(30000)
    assert not engine.is_free_shipping_applicable(29999)


def test_settings_parse_origins_from_list():
    config = Settings(frontend_allowed_origins=["https://a.example", "https://b.example"])

    assert config.frontend_allowed_origins == ("https://a.example", "https://b.example")


def test_base_rate_per_km_is_not_an_override(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("HOS_BASE_RATE_PER_KM", "100")

    config = Settings()
    pricing = build_pricing(config)

    assert "base_rate_per_km" not in Settings.model_fields
    assert pricing.base_rate_per_km == 6
    assert DeliveryEngine(pricing, get_location_table()).compute_base_cost(340) == 2040
