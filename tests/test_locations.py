import pytest

from src.delivery.data.locations_repository import LocationTable, get_location_table
from src.delivery.models.domain import Region, Settlement


def test_list_regions_preserves_declaration_order():
    table = get_location_table()
    regions = table.list_regions()

    assert len(regions) == 37
    assert regions[0] == "Lagos"
    assert regions[-1] == "Bayelsa"
    assert "Federal Capital Territory" in regions
    assert table.list_regions() == regions


def test_list_settlements_for_unknown_or_empty_region_is_empty():
    table = LocationTable([Region(name="Remote", base_distance=400)])

    assert table.list_settlements("Remote") == ()
    assert table.list_settlements("Atlantis") == ()


def test_resolve_location_matches_settlement_case_insensitively():
    table = get_location_table()

    assert table.resolve_location("Lagos", "lekki") == Settlement(name="Lekki", distance=25)
    assert table.resolve_location("Rivers", "PORT HARCOURT") == Settlement(name="Port Harcourt", distance=620)


def test_resolve_location_without_settlement_uses_base_distance():
    table = get_location_table()

    assert table.resolve_location("Oyo") == Settlement(name="Oyo", distance=130)
    assert table.resolve_location("Oyo", "") == Settlement(name="Oyo", distance=130)


def test_resolve_location_falls_back_for_unlisted_settlement():
    table = get_location_table()

    assert table.resolve_location("Lagos", "Nowhereville") == Settlement(name="Lagos", distance=0)
    assert table.is_serviceable("Lagos", "Nowhereville") is True


def test_unknown_region_is_not_found():
    table = get_location_table()

    assert table.resolve_location("Atlantis") is None
    assert table.resolve_location("lagos") is None  # region names are exact
    assert table.is_serviceable("Atlantis", "Lekki") is False


def test_available_locations_shape():
    locations = get_location_table().available_locations()

    assert locations[0] == {
        "state": "Lagos",
        "cities": ["Ikeja", "Victoria Island", "Lekki", "Ikorodu", "Epe", "Badagry"],
        "baseDistance": 0,
    }
    assert all(location["cities"] for location in locations)


def test_duplicate_regions_are_rejected():
    with pytest.raises(ValueError):
        LocationTable([Region(name="Lagos", base_distance=0), Region(name="Lagos", base_distance=10)])
