"""Tests for the valuation, rent and maintenance models."""

from unittest.mock import patch

import pytest

from conftest import FixedRandom
from estate_sim.exceptions import InvalidLocationError
from estate_sim.models import (
    Amenities,
    Location,
    NeighborhoodQuality,
    PropertyExtras,
    PropertyType,
    SpecialFeatures,
    ViewQuality,
)
from estate_sim.pricing import calculate_maintenance_cost, calculate_rent, calculate_value
from estate_sim.pricing.value import (
    FEATURE_BONUSES,
    MarketConditions,
    age_multiplier,
    base_price_per_square_meter,
    condition_multiplier,
    market_multiplier,
)


class TestCalculateValue:
    """Tests for calculate_value."""

    def test_base_value_suburban_house(self) -> None:
        assert calculate_value(100, PropertyType.HOUSE, Location.SUBURBAN) == 350_000

    def test_location_multiplier(self) -> None:
        assert calculate_value(100, PropertyType.HOUSE, Location.DOWNTOWN) == 525_000
        assert calculate_value(100, PropertyType.HOUSE, Location.COUNTRY) == 245_000

    def test_accepts_location_string(self) -> None:
        assert calculate_value(100, PropertyType.HOUSE, "Urban") == 420_000

    def test_unknown_location_raises(self) -> None:
        with pytest.raises(InvalidLocationError):
            calculate_value(100, PropertyType.HOUSE, "Atlantis")

    def test_type_adjustment(self) -> None:
        assert base_price_per_square_meter(PropertyType.MANSION) == pytest.approx(7500 * 1.3)
        assert base_price_per_square_meter(PropertyType.MOBILE_HOME) == pytest.approx(2200 * 0.7)
        assert base_price_per_square_meter(PropertyType.LAND) == 800

    def test_monotonic_in_condition(self) -> None:
        values = [
            calculate_value(120, PropertyType.APARTMENT, Location.URBAN, age=20, condition=c)
            for c in range(0, 101, 5)
        ]
        assert values == sorted(values)

    @pytest.mark.parametrize("feature", sorted(FEATURE_BONUSES))
    def test_monotonic_in_each_feature(self, feature: str) -> None:
        base = PropertyExtras(special_features=SpecialFeatures())
        with_feature = PropertyExtras(special_features=SpecialFeatures(**{feature: True}))

        plain = calculate_value(100, PropertyType.HOUSE, Location.SUBURBAN, extras=base)
        featured = calculate_value(100, PropertyType.HOUSE, Location.SUBURBAN, extras=with_feature)

        assert featured > plain

    def test_feature_bonuses_are_additive(self) -> None:
        extras = PropertyExtras(special_features=SpecialFeatures(swimming_pool=True, garden=True))
        value = calculate_value(100, PropertyType.HOUSE, Location.SUBURBAN, extras=extras)
        assert value == round(350_000 * 1.08)

    def test_lot_premium_capped(self) -> None:
        extras = PropertyExtras(lot_size=100_000)
        value = calculate_value(100, PropertyType.HOUSE, Location.SUBURBAN, extras=extras)
        assert value == round(350_000 * 1.4)

    def test_lot_ignored_for_apartments(self) -> None:
        extras = PropertyExtras(lot_size=100_000)
        value = calculate_value(100, PropertyType.APARTMENT, Location.SUBURBAN, extras=extras)
        assert value == 280_000

    def test_neighborhood_and_view(self) -> None:
        extras = PropertyExtras(
            neighborhood_quality=NeighborhoodQuality.EXCELLENT,
            view_quality=ViewQuality.WATER,
        )
        value = calculate_value(100, PropertyType.HOUSE, Location.SUBURBAN, extras=extras)
        assert value == round(350_000 * 1.25 * 1.15)

    def test_amenities_average(self) -> None:
        extras = PropertyExtras(amenities=Amenities(5, 5, 5, 5, 5))
        value = calculate_value(100, PropertyType.HOUSE, Location.SUBURBAN, extras=extras)
        assert value == round(350_000 * 1.15)

    def test_market_conditions(self) -> None:
        conditions = MarketConditions(demand_level=1.2, interest_rate=3.0)
        assert market_multiplier(conditions) == pytest.approx(1.2)
        value = calculate_value(100, PropertyType.HOUSE, Location.SUBURBAN, market_conditions=conditions)
        assert value == 420_000

    def test_returns_int(self) -> None:
        value = calculate_value(73.3, PropertyType.CONDO, Location.DOWNTOWN, age=12, condition=37)
        assert isinstance(value, int)


class TestMultipliers:
    """Tests for the individual valuation multipliers."""

    def test_condition_range(self) -> None:
        assert condition_multiplier(0) == pytest.approx(0.6)
        assert condition_multiplier(100) == pytest.approx(1.2)

    def test_new_construction_premium(self) -> None:
        assert age_multiplier(1) == 1.1
        assert age_multiplier(5) == 1.05

    def test_linear_decay(self) -> None:
        assert age_multiplier(50) == pytest.approx(0.8)

    def test_historic_premium_branch(self) -> None:
        assert age_multiplier(100, FixedRandom(0.9)) == 1.1
        assert age_multiplier(100, FixedRandom(0.1)) == pytest.approx(0.6)

    def test_historic_draw_leaves_module_rng_alone(self) -> None:
        with patch("random.random") as module_random:
            multiplier = age_multiplier(100)

        module_random.assert_not_called()
        assert multiplier in (1.1, pytest.approx(0.6))

    def test_historic_premium_only_past_seventy(self) -> None:
        assert age_multiplier(70, FixedRandom(0.9)) == pytest.approx(0.72)


class TestCalculateRent:
    """Tests for calculate_rent."""

    def test_base_rent(self) -> None:
        assert calculate_rent(Location.SUBURBAN, 100, 1.0) == 1_800
        assert calculate_rent(Location.DOWNTOWN, 50, 0.5) == 875

    def test_type_multiplier(self) -> None:
        assert calculate_rent(Location.SUBURBAN, 100, 1.0, PropertyType.MANSION) == 2_340
        assert calculate_rent(Location.SUBURBAN, 100, 1.0, PropertyType.INDUSTRIAL) == 1_440

    def test_clamped_to_yield_band(self) -> None:
        # max = 1,000,000 * 1% / 12
        assert calculate_rent(Location.SUBURBAN, 100, 1.0, property_value=1_000_000) == 833
        # min = 10,000,000 * 0.5% / 12
        assert calculate_rent(Location.SUBURBAN, 100, 1.0, property_value=10_000_000) == 4_167

    def test_unknown_location_raises(self) -> None:
        with pytest.raises(InvalidLocationError):
            calculate_rent("Moon", 100, 1.0)


class TestCalculateMaintenanceCost:
    """Tests for calculate_maintenance_cost."""

    def test_share_of_value(self) -> None:
        assert calculate_maintenance_cost(Location.SUBURBAN, 100, 300_000) == round(max(300_000 * 0.02 / 12, 100 * 0.5))

    def test_per_square_meter_floor(self) -> None:
        assert calculate_maintenance_cost(Location.SUBURBAN, 2_000, 300_000) == 1_000

    def test_location_rates(self) -> None:
        assert calculate_maintenance_cost(Location.COUNTRY, 100, 120_000) == 300
        assert calculate_maintenance_cost(Location.DOWNTOWN, 100, 120_000) == 250

    def test_type_adjustment(self) -> None:
        assert calculate_maintenance_cost(Location.SUBURBAN, 100, 300_000, PropertyType.MANSION) == 750
        assert calculate_maintenance_cost(Location.SUBURBAN, 100, 300_000, PropertyType.CONDO) == 375
