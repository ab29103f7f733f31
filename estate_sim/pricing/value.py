"""Property valuation model."""

from __future__ import annotations

import random
from dataclasses import dataclass

from estate_sim.exceptions import InvalidLocationError
from estate_sim.models.enums import (
    Location,
    NeighborhoodQuality,
    PriceTier,
    PropertyType,
    RenovationPotential,
    ViewQuality,
)
from estate_sim.models.property import PropertyExtras, SpecialFeatures

# Base price per m² (USD) for each tier
TIER_BASE_PRICE: dict[PriceTier, float] = {
    PriceTier.LUXURY: 7500,
    PriceTier.HIGH_END: 3500,
    PriceTier.STANDARD: 2800,
    PriceTier.SPECIAL: 2200,
    PriceTier.COMMERCIAL: 3800,
    PriceTier.INDUSTRIAL: 2000,
    PriceTier.LAND: 800,
    PriceTier.VACATION: 4500,
    PriceTier.DEFAULT: 2500,
}

PROPERTY_TIERS: dict[PropertyType, PriceTier] = {
    PropertyType.MANSION: PriceTier.LUXURY,
    PropertyType.VILLA: PriceTier.LUXURY,
    PropertyType.HOUSE: PriceTier.HIGH_END,
    PropertyType.COLONIAL_HOUSE: PriceTier.HIGH_END,
    PropertyType.BUNGALOW: PriceTier.HIGH_END,
    PropertyType.CHALET: PriceTier.HIGH_END,
    PropertyType.FARMHOUSE: PriceTier.HIGH_END,
    PropertyType.APARTMENT: PriceTier.STANDARD,
    PropertyType.CONDO: PriceTier.STANDARD,
    PropertyType.TOWNHOUSE: PriceTier.STANDARD,
    PropertyType.DUPLEX: PriceTier.STANDARD,
    PropertyType.SKYSCRAPER_CONDO: PriceTier.STANDARD,
    PropertyType.ROW_HOUSE: PriceTier.STANDARD,
    PropertyType.COTTAGE: PriceTier.SPECIAL,
    PropertyType.CABIN: PriceTier.SPECIAL,
    PropertyType.TINY_HOME: PriceTier.SPECIAL,
    PropertyType.RANCH_HOUSE: PriceTier.SPECIAL,
    PropertyType.MOBILE_HOME: PriceTier.SPECIAL,
    PropertyType.HOUSEBOAT: PriceTier.SPECIAL,
    PropertyType.COMMERCIAL: PriceTier.COMMERCIAL,
    PropertyType.MIXED_USE: PriceTier.COMMERCIAL,
    PropertyType.INDUSTRIAL: PriceTier.INDUSTRIAL,
    PropertyType.LAND: PriceTier.LAND,
    PropertyType.VACATION: PriceTier.VACATION,
}

# Per-type adjustment on top of the tier price
TYPE_PRICE_ADJUSTMENT: dict[PropertyType, float] = {
    PropertyType.MANSION: 1.3,
    PropertyType.SKYSCRAPER_CONDO: 1.2,
    PropertyType.MOBILE_HOME: 0.7,
}

LOCATION_MULTIPLIERS: dict[Location, float] = {
    Location.DOWNTOWN: 1.5,
    Location.URBAN: 1.2,
    Location.SUBURBAN: 1.0,
    Location.COUNTRY: 0.7,
}

NEIGHBORHOOD_MULTIPLIERS: dict[NeighborhoodQuality, float] = {
    NeighborhoodQuality.EXCELLENT: 1.25,
    NeighborhoodQuality.GOOD: 1.15,
    NeighborhoodQuality.AVERAGE: 1.0,
    NeighborhoodQuality.BELOW_AVERAGE: 0.9,
    NeighborhoodQuality.POOR: 0.8,
}

VIEW_MULTIPLIERS: dict[ViewQuality, float] = {
    ViewQuality.SCENIC: 1.12,
    ViewQuality.WATER: 1.15,
    ViewQuality.MOUNTAIN: 1.10,
    ViewQuality.CITY: 1.08,
    ViewQuality.GARDEN: 1.05,
    ViewQuality.NONE: 1.0,
}

RENOVATION_POTENTIAL_MULTIPLIERS: dict[RenovationPotential, float] = {
    RenovationPotential.HIGH: 1.08,
    RenovationPotential.MEDIUM: 1.04,
    RenovationPotential.LOW: 1.01,
    RenovationPotential.NONE: 1.0,
}

FEATURE_BONUSES: dict[str, float] = {
    "swimming_pool": 0.05,
    "garden": 0.03,
    "rooftop_terrace": 0.04,
    "balcony": 0.02,
    "fireplace": 0.01,
    "home_office": 0.02,
    "garage": 0.03,
    "outdoor_spaces": 0.02,
    "smart_home": 0.04,
    "security_system": 0.02,
}

# Types whose lot size is priced in
LOT_PRICED_TYPES = frozenset(
    {
        PropertyType.HOUSE,
        PropertyType.VILLA,
        PropertyType.MANSION,
        PropertyType.FARMHOUSE,
        PropertyType.COLONIAL_HOUSE,
        PropertyType.RANCH_HOUSE,
    }
)

BASELINE_MEDIAN_INCOME = 50_000
HISTORIC_AGE = 70


@dataclass
class MarketConditions:
    """Demand and financing climate at valuation time."""

    demand_level: float  # 0.5 (very low) to 1.5 (very high)
    interest_rate: float  # percentage, e.g. 3.5


def coerce_location(location: Location | str) -> Location:
    """Return ``location`` as a Location or raise InvalidLocationError."""
    try:
        return Location(location)
    except ValueError:
        raise InvalidLocationError(f"Invalid location: {location!r}") from None


def price_tier(property_type: PropertyType) -> PriceTier:
    return PROPERTY_TIERS.get(property_type, PriceTier.DEFAULT)


def base_price_per_square_meter(property_type: PropertyType) -> float:
    price = TIER_BASE_PRICE[price_tier(property_type)]
    return price * TYPE_PRICE_ADJUSTMENT.get(property_type, 1.0)


def age_multiplier(age: float, rng: random.Random | None = None) -> float:
    """New-construction premium, linear decay, and a coin-flip historic premium.

    Parameters
    ----------
    age : float
        Building age in years.
    rng : random.Random | None
        Source for the historic-premium draw; a fresh unseeded generator when omitted.
    """
    rng = rng or random.Random()
    if age < 2:
        multiplier = 1.1
    elif age < 10:
        multiplier = 1.05
    else:
        multiplier = max(0.6, 1 - (age / 100) * 0.4)

    if age > HISTORIC_AGE and rng.random() > 0.5:
        multiplier = 1.1
    return multiplier


def condition_multiplier(condition: float) -> float:
    """0 -> 0.6, 100 -> 1.2."""
    return 0.6 + (condition / 100) * 0.6


def market_multiplier(conditions: MarketConditions) -> float:
    interest_effect = max(0.85, 1.15 - conditions.interest_rate / 20)
    return conditions.demand_level * interest_effect


def feature_bonus(features: SpecialFeatures) -> float:
    """Sum of the bonuses of every flag that is set."""
    return sum(bonus for name, bonus in FEATURE_BONUSES.items() if getattr(features, name))


def _extras_multiplier(
    size: float,
    property_type: PropertyType,
    extras: PropertyExtras,
) -> float:
    multiplier = 1.0

    if extras.neighborhood_quality is not None:
        multiplier *= NEIGHBORHOOD_MULTIPLIERS[extras.neighborhood_quality]

    if extras.amenities is not None:
        multiplier *= 0.85 + (extras.amenities.average() / 5) * 0.3

    if extras.special_features is not None:
        multiplier *= 1.0 + feature_bonus(extras.special_features)

    if extras.view_quality is not None:
        multiplier *= VIEW_MULTIPLIERS[extras.view_quality]

    if extras.lot_size and property_type in LOT_PRICED_TYPES:
        base_lot_size = size * 2
        if extras.lot_size > base_lot_size:
            lot_multiplier = 1.0 + ((extras.lot_size - base_lot_size) / base_lot_size) * 0.2
            multiplier *= min(lot_multiplier, 1.4)

    if extras.economic_indicators is not None:
        indicators = extras.economic_indicators
        unemployment_effect = 1.0 - (indicators.unemployment_rate - 5) / 100
        job_growth_effect = 1.0 + indicators.job_growth / 100
        income_effect = min(1.3, max(0.8, indicators.median_income / BASELINE_MEDIAN_INCOME))
        multiplier *= (unemployment_effect + job_growth_effect + income_effect) / 3

    if extras.renovation_potential is not None:
        multiplier *= RENOVATION_POTENTIAL_MULTIPLIERS[extras.renovation_potential]

    if extras.market_trends is not None:
        trends = extras.market_trends
        appreciation_effect = 1.0 + trends.historical_appreciation / 100
        supply_effect = max(0.9, 1.1 - trends.property_supply / 100)
        days_effect = max(0.9, 1.1 - trends.average_days_on_market / 200)
        multiplier *= ((appreciation_effect + supply_effect + days_effect) / 3) * trends.seasonality

    return multiplier


def calculate_value(
    size: float,
    property_type: PropertyType,
    location: Location | str,
    age: float | None = None,
    condition: float | None = None,
    market_conditions: MarketConditions | None = None,
    extras: PropertyExtras | None = None,
    rng: random.Random | None = None,
) -> int:
    """Estimate a property's value.

    Multipliers apply in a fixed order: location, age, condition, market
    conditions, then the extended attributes (neighborhood, amenities,
    features, view, lot size, economy, renovation potential, market trends).

    Parameters
    ----------
    size : float
        Floor area in square meters (lot area for land).
    property_type : PropertyType
        Property type; selects the base price tier.
    location : Location | str
        Area; unknown values raise ``InvalidLocationError``.
    age : float | None
        Building age in years.
    condition : float | None
        Condition on a 0-100 scale.
    market_conditions : MarketConditions | None
        Demand and interest-rate climate.
    extras : PropertyExtras | None
        Extended attributes.
    rng : random.Random | None
        Source for the historic-premium draw.

    Returns
    -------
    int
        Value rounded to the nearest dollar.
    """
    location = coerce_location(location)
    value = size * base_price_per_square_meter(property_type)
    value *= LOCATION_MULTIPLIERS[location]

    if age is not None:
        value *= age_multiplier(age, rng)

    if condition is not None:
        value *= condition_multiplier(condition)

    if market_conditions is not None:
        value *= market_multiplier(market_conditions)

    if extras is not None:
        value *= _extras_multiplier(size, property_type, extras)

    return round(value)
