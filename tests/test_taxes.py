"""Tests for property, rental income and capital gains tax."""

import pytest

from conftest import build_property, own
from estate_sim.config import TaxConfig
from estate_sim.models import Location
from estate_sim.pricing import (
    calculate_capital_gains_tax,
    calculate_property_tax,
    calculate_rental_income_tax,
    calculate_total_property_tax,
)
from estate_sim.pricing.taxes import progressive_tax


class TestPropertyTax:
    """Tests for calculate_property_tax."""

    def test_suburban_rate(self) -> None:
        assert calculate_property_tax(build_property(value=300_000)) == 350

    def test_location_rates(self) -> None:
        prop = build_property(value=1_200_000, location=Location.DOWNTOWN)
        assert calculate_property_tax(prop) == 1_800

    def test_event_impact(self) -> None:
        assert calculate_property_tax(build_property(value=300_000), impact=0.1) == 385

    def test_custom_schedule(self) -> None:
        config = TaxConfig(property_tax_rates={location: 0.012 for location in Location})
        assert calculate_property_tax(build_property(value=300_000), config) == 300

    def test_total_counts_only_owned(self) -> None:
        owned = own(build_property(property_id=1))
        listed = build_property(property_id=2)
        assert calculate_total_property_tax([owned, listed]) == 350


class TestRentalIncomeTax:
    """Tests for progressive rental income tax."""

    def test_progressive_brackets(self) -> None:
        assert progressive_tax(60_000, TaxConfig().income_tax_brackets) == pytest.approx(6_500)

    def test_top_bracket(self) -> None:
        expected = 50_000 * 0.10 + 50_000 * 0.15 + 150_000 * 0.25 + 50_000 * 0.35
        assert progressive_tax(300_000, TaxConfig().income_tax_brackets) == pytest.approx(expected)

    def test_monthly_share(self) -> None:
        assert calculate_rental_income_tax(5_000, 0) == 542

    def test_annual_estimate(self) -> None:
        assert calculate_rental_income_tax(5_000, 0, annual_estimate=True) == 6_500

    def test_expenses_are_deducted_at_eighty_percent(self) -> None:
        # taxable = 5,000 - 1,250 * 0.8 = 4,000 per month
        assert calculate_rental_income_tax(5_000, 1_250, annual_estimate=True) == 4_800

    def test_expenses_above_income_owe_nothing(self) -> None:
        assert calculate_rental_income_tax(1_000, 5_000) == 0

    def test_non_decreasing_in_income(self) -> None:
        taxes = [calculate_rental_income_tax(income, 500) for income in range(0, 40_000, 250)]
        assert taxes == sorted(taxes)

    def test_non_increasing_in_expenses(self) -> None:
        taxes = [calculate_rental_income_tax(8_000, expenses) for expenses in range(0, 10_000, 250)]
        assert taxes == sorted(taxes, reverse=True)


class TestCapitalGainsTax:
    """Tests for calculate_capital_gains_tax."""

    def test_long_term_rate(self) -> None:
        assert calculate_capital_gains_tax(100_000, 150_000, 12) == 7_500

    def test_short_term_rate(self) -> None:
        assert calculate_capital_gains_tax(100_000, 150_000, 6) == 12_500

    def test_loss_is_untaxed(self) -> None:
        assert calculate_capital_gains_tax(150_000, 100_000, 24) == 0

    def test_never_negative(self) -> None:
        for sale in range(0, 300_000, 10_000):
            assert calculate_capital_gains_tax(150_000, sale, 3) >= 0
