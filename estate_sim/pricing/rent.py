"""Monthly rent model."""

from estate_sim.models.enums import Location, PropertyType
from estate_sim.pricing.value import coerce_location

# Monthly rent per m² by location
RENT_PRICE_PER_SQUARE_METER: dict[Location, float] = {
    Location.DOWNTOWN: 35,
    Location.URBAN: 25,
    Location.SUBURBAN: 18,
    Location.COUNTRY: 12,
}

RENT_TYPE_MULTIPLIERS: dict[PropertyType, float] = {
    PropertyType.MANSION: 1.3,
    PropertyType.VILLA: 1.3,
    PropertyType.COMMERCIAL: 1.4,
    PropertyType.MIXED_USE: 1.4,
    PropertyType.INDUSTRIAL: 0.8,
}

# Monthly rent must stay within this band of value / 12
MIN_RENT_YIELD = 0.005
MAX_RENT_YIELD = 0.01


def calculate_rent(
    location: Location | str,
    size: float,
    condition_multiplier: float,
    property_type: PropertyType | None = None,
    property_value: float | None = None,
) -> int:
    """Calculate monthly rent.

    Parameters
    ----------
    location : Location | str
        Area of the property.
    size : float
        Floor area in square meters.
    condition_multiplier : float
        Scales the base rent (renovation bonus / 100 at listing time).
    property_type : PropertyType | None
        Applies the luxury / commercial / industrial adjustment.
    property_value : float | None
        When given, clamps rent into the plausible yield band.

    Returns
    -------
    int
        Monthly rent rounded to the nearest dollar.
    """
    location = coerce_location(location)
    rent = RENT_PRICE_PER_SQUARE_METER[location] * size * condition_multiplier

    if property_type is not None:
        rent *= RENT_TYPE_MULTIPLIERS.get(property_type, 1.0)

    if property_value:
        min_rent = property_value * MIN_RENT_YIELD / 12
        max_rent = property_value * MAX_RENT_YIELD / 12
        rent = min(max(rent, min_rent), max_rent)

    return round(rent)
