"""Tests for domain models and date helpers."""

from datetime import date
from decimal import Decimal

import pytest

from conftest import build_property, build_tenant, own
from estate_sim.models import (
    CapitalGainRecord,
    EventCategory,
    EventChoice,
    EventImpact,
    EventImpactType,
    EventSeverity,
    GameEvent,
    LoanState,
    Location,
    PropertyType,
    TaxLedger,
)
from estate_sim.utils import add_months, holding_months, months_between, to_money


def _event(**overrides) -> GameEvent:
    values = dict(
        event_id="recession-abc12345",
        template_id="recession",
        title="Recession",
        description="The economy contracts.",
        severity=EventSeverity.MAJOR,
        category=EventCategory.ECONOMIC,
        duration=6,
        impacts=[EventImpact(EventImpactType.INTEREST_RATE, 0.01)],
        choices=[
            EventChoice(
                "hedge",
                "Hedge",
                impacts=(EventImpact(EventImpactType.INTEREST_RATE, -0.005),),
            )
        ],
        related_events=[],
        start_date=date(2025, 1, 1),
        end_date=date(2025, 7, 1),
    )
    values.update(overrides)
    return GameEvent(**values)


class TestEventImpact:
    """Tests for EventImpact.matches."""

    def test_unfiltered_matches_everything(self) -> None:
        impact = EventImpact(EventImpactType.PROPERTY_VALUE, 0.02)

        assert impact.matches(EventImpactType.PROPERTY_VALUE)
        assert impact.matches(EventImpactType.PROPERTY_VALUE, Location.COUNTRY, PropertyType.LAND)
        assert not impact.matches(EventImpactType.INTEREST_RATE)

    def test_area_filter(self) -> None:
        impact = EventImpact(
            EventImpactType.PROPERTY_VALUE,
            0.02,
            affected_areas=(Location.DOWNTOWN,),
        )

        assert impact.matches(EventImpactType.PROPERTY_VALUE, Location.DOWNTOWN)
        assert not impact.matches(EventImpactType.PROPERTY_VALUE, Location.URBAN)
        # No area given means the caller asks for the global view
        assert impact.matches(EventImpactType.PROPERTY_VALUE)

    def test_property_type_filter(self) -> None:
        impact = EventImpact(
            EventImpactType.PROPERTY_VALUE,
            0.02,
            affected_property_types=(PropertyType.COMMERCIAL,),
        )

        assert impact.matches(EventImpactType.PROPERTY_VALUE, property_type=PropertyType.COMMERCIAL)
        assert not impact.matches(EventImpactType.PROPERTY_VALUE, property_type=PropertyType.HOUSE)


class TestGameEvent:
    """Tests for GameEvent."""

    def test_active_impacts_without_choice(self) -> None:
        assert _event().active_impacts() == [EventImpact(EventImpactType.INTEREST_RATE, 0.01)]

    def test_active_impacts_include_selected_choice(self) -> None:
        event = _event(selected_choice="hedge")

        values = [impact.value for impact in event.active_impacts()]

        assert values == [0.01, -0.005]

    def test_get_choice(self) -> None:
        event = _event()

        assert event.get_choice("hedge").description == "Hedge"
        assert event.get_choice("missing") is None


class TestLoanState:
    """Tests for LoanState.recalculate_repayment."""

    def _loan(self, debt: Decimal | int, rate: float) -> LoanState:
        return LoanState(
            total_debt=to_money(debt),
            monthly_repayment=Decimal("0.00"),
            base_interest_rate=rate,
            next_rate_change_date=date(2025, 4, 1),
            credit_score=600,
            max_loan_amount=Decimal("1000000.00"),
            max_loan_to_value_ratio=0.7,
        )

    def test_interest_only(self) -> None:
        loan = self._loan(100_000, 0.06)
        loan.recalculate_repayment()

        assert loan.monthly_repayment == Decimal("500.00")

    def test_repayment_rounded_to_cents(self) -> None:
        loan = self._loan(100_000, 0.05)
        loan.recalculate_repayment()

        assert loan.monthly_repayment == Decimal("416.67")

    def test_no_debt(self) -> None:
        loan = self._loan(0, 0.06)
        loan.recalculate_repayment()

        assert loan.monthly_repayment == Decimal("0.00")


class TestProperty:
    """Tests for Property helpers."""

    def test_rental_flags(self) -> None:
        prop = build_property()

        assert not prop.is_owned
        assert not prop.is_rented
        assert prop.rentee is None

        own(prop)
        prop.current_tenant = build_tenant(name="Sam Lee")

        assert prop.is_owned
        assert prop.is_rented
        assert prop.rentee == "Sam Lee"

    def test_extras(self) -> None:
        prop = build_property(lot_size=900)

        extras = prop.extras()

        assert extras.lot_size == 900
        assert extras.amenities is prop.amenities


class TestTaxLedger:
    """Tests for TaxLedger."""

    def test_record_month_accumulates(self) -> None:
        ledger = TaxLedger()
        ledger.record_month(date(2025, 2, 1), 350, 100, 2_000)
        ledger.record_month(date(2025, 3, 1), 350, 120, 2_000)

        assert ledger.year == 2025
        assert ledger.last_month_income_tax == 120
        assert ledger.ytd_property_tax == 700
        assert ledger.ytd_income_tax == 220

    def test_year_rollover_resets(self) -> None:
        ledger = TaxLedger()
        ledger.record_month(date(2025, 12, 1), 350, 100, 2_000)
        ledger.record_capital_gains(date(2025, 12, 5), 5_000)
        ledger.record_month(date(2026, 1, 1), 400, 50, 2_000)

        assert ledger.year == 2026
        assert ledger.ytd_property_tax == 400
        assert ledger.ytd_capital_gains_tax == 0
        assert ledger.ytd_total == 450

    def test_capital_gain_profit(self) -> None:
        record = CapitalGainRecord(1, date(2025, 6, 1), 100_000, 130_000, 5, 7_500)

        assert record.profit == 30_000


class TestMoneyHelpers:
    """Tests for estate_sim.utils.to_money."""

    @pytest.mark.parametrize(
        "amount, expected",
        [(416.6666666, "416.67"), (27.075, "27.08"), (250_000, "250000.00"), (Decimal("0.005"), "0.01")],
    )
    def test_quantizes_to_cents(self, amount, expected: str) -> None:
        assert to_money(amount) == Decimal(expected)


class TestDateHelpers:
    """Tests for estate_sim.utils."""

    def test_add_months(self) -> None:
        assert add_months(date(2025, 1, 15), 3) == date(2025, 4, 15)
        assert add_months(date(2025, 11, 1), 2) == date(2026, 1, 1)

    def test_add_months_clamps_to_month_end(self) -> None:
        assert add_months(date(2025, 1, 31), 1) == date(2025, 2, 28)
        assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)

    def test_months_between(self) -> None:
        assert months_between(date(2025, 1, 31), date(2025, 2, 1)) == 1
        assert months_between(date(2024, 6, 1), date(2025, 6, 1)) == 12

    def test_holding_months(self) -> None:
        assert holding_months(date(2025, 1, 1), date(2025, 1, 31)) == 1
        assert holding_months(date(2025, 1, 1), date(2025, 1, 10)) == 0
