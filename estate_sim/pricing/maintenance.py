"""Monthly maintenance cost model."""

from estate_sim.models.enums import Location, PropertyType
from estate_sim.pricing.value import coerce_location

BASE_ANNUAL_RATE = 0.02
MINIMUM_COST_PER_SQUARE_METER = 0.5

LOCATION_ANNUAL_RATES: dict[Location, float] = {
    Location.DOWNTOWN: 0.025,
    Location.URBAN: 0.025,
    Location.SUBURBAN: BASE_ANNUAL_RATE,
    Location.COUNTRY: 0.03,
}

TYPE_RATE_ADJUSTMENTS: dict[PropertyType, float] = {
    PropertyType.MANSION: 0.01,
    PropertyType.VILLA: 0.01,
    PropertyType.APARTMENT: -0.005,
    PropertyType.CONDO: -0.005,
}


def annual_maintenance_rate(
    location: Location | str,
    property_type: PropertyType | None = None,
) -> float:
    rate = LOCATION_ANNUAL_RATES[coerce_location(location)]
    if property_type is not None:
        rate += TYPE_RATE_ADJUSTMENTS.get(property_type, 0.0)
    return rate


def calculate_maintenance_cost(
    location: Location | str,
    size: float,
    value: float,
    property_type: PropertyType | None = None,
) -> int:
    """Monthly upkeep: a share of value, never below $0.50/m²."""
    monthly = value * annual_maintenance_rate(location, property_type) / 12
    minimum = size * MINIMUM_COST_PER_SQUARE_METER
    return round(max(monthly, minimum))
