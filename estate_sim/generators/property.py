"""Property generator for the listing market."""

from __future__ import annotations

import logging
import math
import random
from datetime import date, timedelta
from typing import Iterator, Sequence

from estate_sim.generators.base import BaseGenerator
from estate_sim.models.enums import (
    IntendedPurpose,
    Location,
    NeighborhoodQuality,
    PropertyType,
    RenovationPotential,
    ViewQuality,
)
from estate_sim.models.property import (
    Amenities,
    EconomicIndicators,
    MarketTrends,
    Property,
    PropertyExtras,
    SpecialFeatures,
)
from estate_sim.pricing.maintenance import calculate_maintenance_cost
from estate_sim.pricing.rent import calculate_rent
from estate_sim.pricing.taxes import calculate_property_tax
from estate_sim.pricing.value import calculate_value

logger = logging.getLogger(__name__)

# Types each location allows; every location includes Land
LOCATION_PROPERTY_TYPES: dict[Location, list[PropertyType]] = {
    Location.DOWNTOWN: [
        PropertyType.APARTMENT,
        PropertyType.CONDO,
        PropertyType.SKYSCRAPER_CONDO,
        PropertyType.COMMERCIAL,
        PropertyType.MIXED_USE,
        PropertyType.LAND,
    ],
    Location.URBAN: [
        PropertyType.APARTMENT,
        PropertyType.CONDO,
        PropertyType.TOWNHOUSE,
        PropertyType.COMMERCIAL,
        PropertyType.INDUSTRIAL,
        PropertyType.LAND,
        PropertyType.MIXED_USE,
    ],
    Location.SUBURBAN: [
        PropertyType.HOUSE,
        PropertyType.APARTMENT,
        PropertyType.LAND,
        PropertyType.MOBILE_HOME,
        PropertyType.RANCH_HOUSE,
        PropertyType.COLONIAL_HOUSE,
        PropertyType.DUPLEX,
        PropertyType.ROW_HOUSE,
        PropertyType.VILLA,
        PropertyType.BUNGALOW,
        PropertyType.MANSION,
        PropertyType.TINY_HOME,
        PropertyType.HOUSEBOAT,
        PropertyType.CHALET,
    ],
    Location.COUNTRY: [
        PropertyType.HOUSE,
        PropertyType.FARMHOUSE,
        PropertyType.COTTAGE,
        PropertyType.BUNGALOW,
        PropertyType.CHALET,
        PropertyType.LAND,
        PropertyType.VACATION,
        PropertyType.HOUSEBOAT,
        PropertyType.CABIN,
        PropertyType.MANSION,
        PropertyType.TINY_HOME,
        PropertyType.RANCH_HOUSE,
        PropertyType.COLONIAL_HOUSE,
    ],
}

DEFAULT_SIZE_RANGE = (10, 300)
LAND_SIZE_RANGE = (1000, 10000)
COUNTRY_LAND_SIZE_RANGE = (5000, 50000)

# (location, type) specific floor-area ranges in m²
SIZE_RANGES: dict[tuple[Location, PropertyType], tuple[int, int]] = {
    (Location.DOWNTOWN, PropertyType.APARTMENT): (30, 100),
    (Location.DOWNTOWN, PropertyType.CONDO): (50, 150),
    (Location.URBAN, PropertyType.TOWNHOUSE): (70, 200),
    (Location.SUBURBAN, PropertyType.HOUSE): (100, 300),
    (Location.COUNTRY, PropertyType.FARMHOUSE): (150, 400),
}

DEFAULT_ROOM_RANGE = (1, 5)

TYPE_ROOM_RANGES: dict[PropertyType, tuple[int, int]] = {
    PropertyType.MANSION: (4, 10),
    PropertyType.VILLA: (4, 10),
    PropertyType.COLONIAL_HOUSE: (4, 10),
    PropertyType.FARMHOUSE: (4, 10),
    PropertyType.HOUSE: (3, 6),
    PropertyType.RANCH_HOUSE: (3, 6),
    PropertyType.BUNGALOW: (3, 6),
    PropertyType.DUPLEX: (3, 6),
    PropertyType.TINY_HOME: (1, 2),
    PropertyType.MOBILE_HOME: (1, 2),
    PropertyType.COMMERCIAL: (1, 20),
    PropertyType.INDUSTRIAL: (1, 20),
    PropertyType.MIXED_USE: (1, 20),
}

LOCATION_ROOM_RANGES: dict[tuple[Location, PropertyType], tuple[int, int]] = {
    (Location.DOWNTOWN, PropertyType.APARTMENT): (1, 3),
    (Location.DOWNTOWN, PropertyType.CONDO): (2, 4),
    (Location.URBAN, PropertyType.TOWNHOUSE): (3, 6),
}

NEIGHBORHOOD_ORDER = [
    NeighborhoodQuality.EXCELLENT,
    NeighborhoodQuality.GOOD,
    NeighborhoodQuality.AVERAGE,
    NeighborhoodQuality.BELOW_AVERAGE,
    NeighborhoodQuality.POOR,
]

NEIGHBORHOOD_PROBABILITIES: dict[Location, list[float]] = {
    Location.DOWNTOWN: [0.3, 0.4, 0.2, 0.07, 0.03],
    Location.URBAN: [0.2, 0.3, 0.3, 0.15, 0.05],
    Location.SUBURBAN: [0.15, 0.35, 0.35, 0.1, 0.05],
    Location.COUNTRY: [0.1, 0.25, 0.4, 0.15, 0.1],
}

NEIGHBORHOOD_SCORES: dict[NeighborhoodQuality, float] = {
    NeighborhoodQuality.EXCELLENT: 1.0,
    NeighborhoodQuality.GOOD: 0.8,
    NeighborhoodQuality.AVERAGE: 0.6,
    NeighborhoodQuality.BELOW_AVERAGE: 0.4,
    NeighborhoodQuality.POOR: 0.2,
}

VIEW_PRONE_TYPES = frozenset({PropertyType.MANSION, PropertyType.VILLA, PropertyType.SKYSCRAPER_CONDO})
LUXURY_TYPES = frozenset({PropertyType.MANSION, PropertyType.VILLA})

# schools, parks, shopping, transportation, healthcare
AMENITY_BASES: dict[Location, tuple[float, float, float, float, float]] = {
    Location.DOWNTOWN: (3, 2, 5, 5, 4),
    Location.URBAN: (3.5, 3, 4, 4, 3.5),
    Location.SUBURBAN: (4, 4, 3, 2.5, 3),
    Location.COUNTRY: (2, 5, 1.5, 1, 1.5),
}

POOL_COMPATIBILITY = {PropertyType.HOUSE: 0.6, PropertyType.MANSION: 0.9, PropertyType.VILLA: 0.8}
GARDEN_COMPATIBILITY = {
    PropertyType.HOUSE: 0.8,
    PropertyType.FARMHOUSE: 0.9,
    PropertyType.COTTAGE: 0.8,
    PropertyType.VILLA: 0.9,
    PropertyType.MANSION: 0.9,
}

# unemployment %, job growth %, population, median income
ECONOMIC_BASES: dict[Location, tuple[float, float, int, int]] = {
    Location.DOWNTOWN: (4.0, 2.3, 500_000, 75_000),
    Location.URBAN: (4.5, 1.8, 300_000, 60_000),
    Location.SUBURBAN: (3.8, 1.5, 150_000, 80_000),
    Location.COUNTRY: (5.2, 0.8, 50_000, 55_000),
}

APPRECIATION_BASES: dict[Location, float] = {
    Location.DOWNTOWN: 3.5,
    Location.URBAN: 2.8,
    Location.SUBURBAN: 2.5,
    Location.COUNTRY: 1.8,
}

LOT_MULTIPLIERS: dict[PropertyType, float] = {
    PropertyType.MANSION: 10,
    PropertyType.VILLA: 7,
    PropertyType.FARMHOUSE: 20,
    PropertyType.RANCH_HOUSE: 15,
    PropertyType.HOUSE: 3,
    PropertyType.COLONIAL_HOUSE: 3,
}

ADJECTIVES = [
    "Spacious", "Cozy", "Luxurious", "Modern", "Elegant", "Rustic", "Charming",
    "Inviting", "Quaint", "Expansive", "Stylish", "Sophisticated", "Contemporary",
    "Secluded", "Grand", "Minimalist", "Vintage", "Picturesque", "Idyllic", "Unique",
]

MARKETING_ADJECTIVES = [
    "hot new", "just listed", "must-see", "unbeatable",
    "prime", "premium", "desirable", "rare find",
]

MAX_BUILDING_AGE_DAYS = 100 * 365


def seasonality_for_month(month: int) -> float:
    """Spring and autumn are busy, winter is slow."""
    if month in (3, 4, 5):
        return 1.1
    if month in (9, 10, 11):
        return 1.05
    if month in (12, 1, 2):
        return 0.9
    return 1.0


class PropertyGenerator(BaseGenerator):
    """Generate fully specified properties for the listing market.

    Market-trend fields are comparative: supply and days on market are
    derived from ``existing_properties`` when comparable listings exist.
    """

    def generate(
        self,
        property_id: int,
        existing_properties: Sequence[Property] = (),
        today: date | None = None,
    ) -> Property:
        """Generate one property.

        Parameters
        ----------
        property_id : int
            Identifier to assign.
        existing_properties : Sequence[Property]
            Properties already in the world, used for supply and
            days-on-market statistics.
        today : date | None
            Simulated date (listing date and seasonality).

        Returns
        -------
        Property
            Generated property; the caller owns inserting it.
        """
        today = today or date.today()
        location = self.rng.choice(list(Location))
        property_type = self.rng.choice(LOCATION_PROPERTY_TYPES[location])
        size = self._generate_size(location, property_type)
        rooms = self._generate_rooms(location, property_type)

        building_date = today - timedelta(days=self.rng.randint(0, MAX_BUILDING_AGE_DAYS))
        age = (today - building_date).days // 365

        neighborhood_quality = self.weighted_choice(
            NEIGHBORHOOD_ORDER, NEIGHBORHOOD_PROBABILITIES[location]
        )
        view_quality = self._generate_view(location, property_type)
        amenities = self._generate_amenities(location)
        special_features = self._generate_special_features(location, property_type, neighborhood_quality)
        renovation_potential = self._generate_renovation_potential(property_type, age)
        economic_indicators = self._generate_economic_indicators(location)
        market_trends = self._generate_market_trends(location, property_type, existing_properties, today)
        lot_size = self._generate_lot_size(property_type, size)

        extras = PropertyExtras(
            neighborhood_quality=neighborhood_quality,
            amenities=amenities,
            special_features=special_features,
            view_quality=view_quality,
            lot_size=lot_size,
            economic_indicators=economic_indicators,
            renovation_potential=renovation_potential,
            market_trends=market_trends,
        )

        renovation_bonus = self.rng.randint(0, 100)
        value = calculate_value(
            size, property_type, location, age, renovation_bonus, None, extras, rng=self.rng
        )
        market_price = math.floor(value * self.rng.uniform(0.9, 1.1))
        rent_price = calculate_rent(location, size, renovation_bonus / 100)
        maintenance = calculate_maintenance_cost(location, size, value)

        adjective = self.rng.choice(ADJECTIVES)
        description = self._describe(property_type, location, size, rooms, renovation_potential, adjective)

        prop = Property(
            property_id=property_id,
            address=f"{self.rng.randint(1, 999)} {self.fake.last_name()} St, {location.value}",
            adjective=adjective,
            description=description,
            property_type=property_type,
            location=location,
            size=size,
            rooms=rooms,
            building_date=building_date,
            intended_purpose=self.rng.choice(list(IntendedPurpose)),
            neighborhood_quality=neighborhood_quality,
            view_quality=view_quality,
            amenities=amenities,
            special_features=special_features,
            renovation_potential=renovation_potential,
            economic_indicators=economic_indicators,
            market_trends=market_trends,
            value=value,
            market_price=market_price,
            renovation_bonus_percentage=renovation_bonus,
            maintenance_costs=maintenance,
            rent_price=rent_price,
            property_tax=0,
            listed_date=today,
            lot_size=lot_size,
            time_on_market=self.rng.randint(1, 90),
        )
        prop.property_tax = calculate_property_tax(prop)
        logger.debug("Generated property %d: %s in %s", property_id, property_type.value, location.value)
        return prop

    def generate_batch(self, count: int, today: date | None = None) -> Iterator[Property]:
        """Generate properties sequentially, each seeing the ones before it."""
        existing: list[Property] = []
        for property_id in range(1, count + 1):
            prop = self.generate(property_id, existing, today)
            existing.append(prop)
            yield prop

    def _generate_size(self, location: Location, property_type: PropertyType) -> int:
        if property_type == PropertyType.LAND:
            low, high = COUNTRY_LAND_SIZE_RANGE if location == Location.COUNTRY else LAND_SIZE_RANGE
        else:
            low, high = SIZE_RANGES.get((location, property_type), DEFAULT_SIZE_RANGE)
        return self.rng.randint(low, high)

    def _generate_rooms(self, location: Location, property_type: PropertyType) -> int | None:
        if property_type == PropertyType.LAND:
            return None

        low, high = LOCATION_ROOM_RANGES.get(
            (location, property_type),
            TYPE_ROOM_RANGES.get(property_type, DEFAULT_ROOM_RANGE),
        )
        # Country homes run larger
        if location == Location.COUNTRY:
            low, high = max(low, 2), high + 2
        return self.rng.randint(low, high)

    def _generate_view(self, location: Location, property_type: PropertyType) -> ViewQuality:
        if property_type in VIEW_PRONE_TYPES:
            view_chance = 0.8
        elif location == Location.COUNTRY:
            view_chance = 0.6
        elif location == Location.DOWNTOWN:
            view_chance = 0.5
        else:
            view_chance = 0.3

        if self.rng.random() >= view_chance:
            return ViewQuality.NONE

        if location == Location.COUNTRY and self.rng.random() < 0.7:
            return ViewQuality.SCENIC if self.rng.random() < 0.6 else ViewQuality.MOUNTAIN
        if location == Location.DOWNTOWN and self.rng.random() < 0.8:
            return ViewQuality.CITY
        return self.rng.choice([v for v in ViewQuality if v != ViewQuality.NONE])

    def _generate_amenities(self, location: Location) -> Amenities:
        scores = [
            round(min(5.0, max(0.0, base + self.rng.uniform(-1, 1))), 1)
            for base in AMENITY_BASES[location]
        ]
        return Amenities(*scores)

    def _generate_special_features(
        self,
        location: Location,
        property_type: PropertyType,
        neighborhood_quality: NeighborhoodQuality,
    ) -> SpecialFeatures:
        value_tier = NEIGHBORHOOD_SCORES[neighborhood_quality]
        if property_type in LUXURY_TYPES:
            value_tier += 0.3
        if location == Location.DOWNTOWN:
            value_tier += 0.2
        value_tier /= 1.5

        def chance(base: float, compatibility: float) -> bool:
            return self.rng.random() < base * compatibility * (0.2 + value_tier * 0.8)

        def flag(probability: float) -> bool:
            return self.rng.random() < probability * value_tier

        return SpecialFeatures(
            swimming_pool=chance(0.3, POOL_COMPATIBILITY.get(property_type, 0.1)),
            garden=chance(0.5, GARDEN_COMPATIBILITY.get(property_type, 0.2)),
            rooftop_terrace=flag(0.6 if property_type == PropertyType.SKYSCRAPER_CONDO else 0.1),
            balcony=flag(0.7 if property_type in (PropertyType.APARTMENT, PropertyType.CONDO) else 0.3),
            fireplace=flag(0.4),
            home_office=flag(0.5),
            garage=flag(
                0.8 if property_type in (PropertyType.HOUSE, PropertyType.VILLA, PropertyType.MANSION) else 0.2
            ),
            outdoor_spaces=flag(0.6),
            smart_home=flag(0.3),
            security_system=flag(0.4),
        )

    def _generate_renovation_potential(self, property_type: PropertyType, age: int) -> RenovationPotential:
        roll = self.rng.random()
        if property_type == PropertyType.LAND:
            # Development potential
            if roll < 0.3:
                return RenovationPotential.HIGH
            if roll < 0.6:
                return RenovationPotential.MEDIUM
            if roll < 0.8:
                return RenovationPotential.LOW
            return RenovationPotential.NONE

        if age < 5:
            return RenovationPotential.LOW if roll < 0.1 else RenovationPotential.NONE
        if age < 15:
            return RenovationPotential.LOW if roll < 0.7 else RenovationPotential.MEDIUM
        if age < 30:
            return RenovationPotential.MEDIUM if roll < 0.6 else RenovationPotential.HIGH
        return RenovationPotential.HIGH

    def _generate_economic_indicators(self, location: Location) -> EconomicIndicators:
        unemployment, job_growth, population, income = ECONOMIC_BASES[location]
        return EconomicIndicators(
            unemployment_rate=round(max(0.0, unemployment + self.rng.uniform(-1, 1)), 1),
            job_growth=round(job_growth + self.rng.uniform(-0.5, 0.5), 1),
            population=round(population * self.rng.uniform(0.9, 1.1)),
            median_income=round(income * self.rng.uniform(0.9, 1.1)),
        )

    def _generate_market_trends(
        self,
        location: Location,
        property_type: PropertyType,
        existing_properties: Sequence[Property],
        today: date,
    ) -> MarketTrends:
        appreciation = APPRECIATION_BASES[location]
        if property_type in (PropertyType.COMMERCIAL, PropertyType.MIXED_USE):
            appreciation += 0.5
        elif property_type in LUXURY_TYPES:
            appreciation += 0.3
        appreciation += self.rng.uniform(-1, 1)

        comparable = [
            p for p in existing_properties
            if p.property_type == property_type and p.location == location
        ]
        unowned = [p for p in comparable if not p.is_owned]

        supply = len(unowned) if unowned else self.rng.randint(5, 29)
        if comparable:
            mean_days = sum(p.time_on_market for p in comparable) / len(comparable)
            days_on_market = max(5, math.ceil(mean_days))
        else:
            days_on_market = self.rng.randint(20, 79)

        return MarketTrends(
            historical_appreciation=round(appreciation, 1),
            property_supply=supply,
            average_days_on_market=days_on_market,
            seasonality=seasonality_for_month(today.month),
        )

    def _generate_lot_size(self, property_type: PropertyType, size: int) -> int | None:
        multiplier = LOT_MULTIPLIERS.get(property_type)
        if multiplier is None:
            return None
        return round(size * multiplier * self.rng.uniform(0.5, 1.5))

    def _describe(
        self,
        property_type: PropertyType,
        location: Location,
        size: int,
        rooms: int | None,
        renovation_potential: RenovationPotential,
        adjective: str,
    ) -> str:
        marketing = self.rng.choice(MARKETING_ADJECTIVES).capitalize()
        if property_type == PropertyType.LAND:
            return (
                f"{marketing} {size} m² Land with {renovation_potential.value.lower()} "
                f"development potential in {location.value}."
            )
        room_word = "room" if rooms == 1 else "rooms"
        return f"{marketing} {adjective} {property_type.value} with {rooms} {room_word} located in {location.value}."


def generate_random_property(
    property_id: int,
    existing_properties: Sequence[Property] = (),
    rng: random.Random | None = None,
    today: date | None = None,
) -> Property:
    """Generate one property from an explicit random stream."""
    return PropertyGenerator(rng=rng).generate(property_id, existing_properties, today)


def generate_random_properties(
    count: int,
    seed: int | None = None,
    today: date | None = None,
) -> list[Property]:
    """Generate ``count`` properties with ids 1..count."""
    return list(PropertyGenerator(seed=seed).generate_batch(count, today))
