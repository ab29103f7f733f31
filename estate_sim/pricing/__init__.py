"""Pricing models: value, rent, maintenance and tax."""

from estate_sim.pricing.maintenance import calculate_maintenance_cost
from estate_sim.pricing.rent import calculate_rent
from estate_sim.pricing.taxes import (
    calculate_capital_gains_tax,
    calculate_property_tax,
    calculate_rental_income_tax,
    calculate_total_property_tax,
)
from estate_sim.pricing.value import MarketConditions, calculate_value

__all__ = [
    "MarketConditions",
    "calculate_capital_gains_tax",
    "calculate_maintenance_cost",
    "calculate_property_tax",
    "calculate_rent",
    "calculate_rental_income_tax",
    "calculate_total_property_tax",
    "calculate_value",
]
