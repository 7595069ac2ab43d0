"""Nigerian states, major cities and their road distance from the Lagos hub (km)."""

from __future__ import annotations

import math

from ..models.domain import (
    DeliveryTimeBand,
    PricingConfiguration,
    Region,
    Settlement,
    SpeedOption,
    Zone,
)


def _region(name: str, base_distance: int, *cities: tuple[str, int]) -> Region:
    return Region(
        name=name,
        base_distance=base_distance,
        settlements=tuple(Settlement(name=city, distance=distance) for city, distance in cities),
    )


NIGERIA_REGIONS: tuple[Region, ...] = (
    # Lagos is the hub
    _region(
        "Lagos", 0,
        ("Ikeja", 10), ("Victoria Island", 15), ("Lekki", 25),
        ("Ikorodu", 35), ("Epe", 95), ("Badagry", 65),
    ),
    _region("Ogun", 80, ("Abeokuta", 80), ("Ijebu-Ode", 110), ("Sagamu", 60), ("Ota", 35), ("Ilaro", 95)),
    _region("Oyo", 130, ("Ibadan", 130), ("Ogbomoso", 220), ("Oyo", 180), ("Iseyin", 210)),
    _region("Osun", 250, ("Osogbo", 250), ("Ile-Ife", 230), ("Ilesa", 260), ("Ede", 240)),
    _region("Ondo", 340, ("Akure", 340), ("Ondo", 280), ("Owo", 360)),
    _region("Ekiti", 310, ("Ado-Ekiti", 310), ("Ikere-Ekiti", 320), ("Efon-Alaaye", 330)),
    _region("Kwara", 310, ("Ilorin", 310), ("Offa", 350), ("Jebba", 420)),
    _region("Kogi", 480, ("Lokoja", 480), ("Okene", 520), ("Kabba", 450)),
    _region("Niger", 550, ("Minna", 550), ("Suleja", 485), ("Bida", 600)),
    _region("Federal Capital Territory", 760, ("Abuja", 760), ("Gwagwalada", 795), ("Kuje", 810)),
    _region("Nasarawa", 850, ("Lafia", 850), ("Keffi", 780), ("Akwanga", 820)),
    _region("Plateau", 960, ("Jos", 960), ("Bukuru", 970)),
    _region("Benue", 800, ("Makurdi", 800), ("Gboko", 850), ("Otukpo", 880)),
    _region("Taraba", 1100, ("Jalingo", 1100), ("Wukari", 1050)),
    _region("Adamawa", 1200, ("Yola", 1200), ("Jimeta", 1205), ("Mubi", 1350)),
    _region("Gombe", 1050, ("Gombe", 1050), ("Dukku", 1090)),
    _region("Bauchi", 950, ("Bauchi", 950), ("Azare", 1020)),
    _region("Yobe", 1150, ("Damaturu", 1150), ("Potiskum", 1100)),
    _region("Borno", 1320, ("Maiduguri", 1320), ("Biu", 1200)),
    _region("Jigawa", 1100, ("Dutse", 1100), ("Hadejia", 1200)),
    _region("Kano", 1050, ("Kano", 1050), ("Wudil", 1080)),
    _region("Katsina", 1150, ("Katsina", 1150), ("Daura", 1250), ("Funtua", 1100)),
    _region("Kaduna", 760, ("Kaduna", 760), ("Zaria", 840), ("Kafanchan", 700)),
    _region("Zamfara", 950, ("Gusau", 950), ("Kaura Namoda", 1000)),
    _region("Sokoto", 1200, ("Sokoto", 1200), ("Tambuwal", 1150)),
    _region("Kebbi", 1100, ("Birnin Kebbi", 1100), ("Argungu", 1150)),
    _region("Edo", 320, ("Benin City", 320), ("Auchi", 420), ("Ekpoma", 350)),
    _region("Delta", 420, ("Asaba", 420), ("Warri", 480), ("Sapele", 450), ("Ughelli", 490)),
    _region("Anambra", 520, ("Awka", 520), ("Onitsha", 480), ("Nnewi", 510)),
    _region("Enugu", 580, ("Enugu", 580), ("Nsukka", 650), ("Agbani", 600)),
    _region("Ebonyi", 720, ("Abakaliki", 720), ("Afikpo", 780)),
    _region("Imo", 480, ("Owerri", 480), ("Orlu", 520), ("Okigwe", 550)),
    _region("Abia", 540, ("Umuahia", 540), ("Aba", 520), ("Arochukwu", 650)),
    _region("Akwa Ibom", 680, ("Uyo", 680), ("Ikot Ekpene", 650), ("Eket", 720)),
    _region("Cross River", 860, ("Calabar", 860), ("Ogoja", 920), ("Ikom", 900)),
    _region("Rivers", 620, ("Port Harcourt", 620), ("Eleme", 640), ("Bonny", 680)),
    _region("Bayelsa", 680, ("Yenagoa", 680), ("Brass", 750)),
)


# Hybrid model: distance zones plus delivery speed multipliers
DEFAULT_PRICING = PricingConfiguration(
    base_rate_per_km=6,
    minimum_fee=1500,
    free_shipping_threshold=50000,
    hub_zone=Zone(label="lagos", max_distance=50, rate=1500, flat=True),
    zones=(
        Zone(label="nearbyStates", max_distance=200, rate=5),
        Zone(label="southWest", max_distance=400, rate=6),
        Zone(label="southSouth", max_distance=700, rate=6),
        Zone(label="southEast", max_distance=700, rate=6),
        Zone(label="middleBelt", max_distance=900, rate=7),
        Zone(label="northCentral", max_distance=900, rate=7),
        Zone(label="northWest", max_distance=1300, rate=8),
        Zone(label="northEast", max_distance=1400, rate=8),
    ),
    speed_options=(
        SpeedOption(
            key="economy",
            display_name="Economy",
            description="5-7 business days",
            cost_multiplier=0.7,
            min_days=5,
            max_days=7,
        ),
        SpeedOption(
            key="standard",
            display_name="Standard",
            description="2-4 business days",
            cost_multiplier=1.0,
            min_days=2,
            max_days=4,
            is_default=True,
        ),
        SpeedOption(
            key="express",
            display_name="Express",
            description="1-2 business days",
            cost_multiplier=1.8,
            min_days=1,
            max_days=2,
        ),
    ),
    delivery_time_bands=(
        DeliveryTimeBand(label="lagos", max_distance=50, standard_days=1),
        DeliveryTimeBand(label="nearbyStates", max_distance=200, standard_days=2),
        DeliveryTimeBand(label="mediumDistance", max_distance=600, standard_days=3),
        DeliveryTimeBand(label="farDistance", max_distance=1000, standard_days=4),
        DeliveryTimeBand(label="veryFarDistance", max_distance=math.inf, standard_days=5),
    ),
)
