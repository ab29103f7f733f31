"""Tests for property and tenant generators."""

import logging
import random
from datetime import date

import pytest

from conftest import build_property, build_tenant, own
from estate_sim.generators import (
    PropertyGenerator,
    TenantGenerator,
    calculate_tenant_event_probability,
    generate_random_properties,
    generate_random_property,
)
from estate_sim.generators.property import (
    LOCATION_PROPERTY_TYPES,
    LOT_MULTIPLIERS,
    seasonality_for_month,
)
from estate_sim.models import Location, PropertyType, RentalHistory, Rating, TenantEventType

TODAY = date(2025, 4, 1)


class TestTenantGenerator:
    """Tests for TenantGenerator."""

    def test_generate(self, seed: int) -> None:
        gen = TenantGenerator(seed=seed)

        tenant = gen.generate(2_000)

        assert tenant.tenant_id
        assert tenant.name
        assert tenant.rent_amount == 2_000
        assert tenant.monthly_income > 0
        assert 1 <= tenant.family_size <= 5
        assert tenant.lease_length in (6, 12, 18, 24)

    def test_batch_invariants(self, seed: int) -> None:
        gen = TenantGenerator(seed=seed)

        for tenant in gen.generate_batch(1_500, 200):
            assert 350 <= tenant.credit_score <= 850
            assert 0 <= tenant.payment_probability <= 0.98
            assert 0 <= tenant.property_care_probability <= 0.95
            assert tenant.planned_stay_duration >= 1
            assert tenant.rental_history.evictions in (0, 1, 2)
            assert 1 <= tenant.rental_history.times_moved_last_five_years <= 4

    def test_apply_credit_score(self) -> None:
        tenant = build_tenant(monthly_income=4_000, rent_amount=2_000)

        TenantGenerator.apply_credit_score(tenant, 600)

        assert tenant.credit_score == 600
        assert tenant.payment_probability == pytest.approx(0.98)
        assert tenant.property_care_probability == pytest.approx(0.9)

    def test_payment_probability_below_cap(self) -> None:
        tenant = build_tenant(monthly_income=1_000, rent_amount=10_000)

        TenantGenerator.apply_credit_score(tenant, 350)

        assert tenant.payment_probability == pytest.approx(0.5 + 0.35 + 0.01)

    def test_zero_rent_saturates_payment_probability(self) -> None:
        tenant = TenantGenerator(seed=1).generate(0)

        assert tenant.rent_amount == 0
        assert tenant.monthly_income == 0
        assert tenant.payment_probability == pytest.approx(0.98)

    def test_probabilities_monotonic_in_credit_score(self) -> None:
        tenant = build_tenant(monthly_income=500, rent_amount=5_000)
        previous = (0.0, 0.0)
        for score in range(350, 851, 25):
            TenantGenerator.apply_credit_score(tenant, score)
            current = (tenant.payment_probability, tenant.property_care_probability)
            assert current[0] >= previous[0]
            assert current[1] >= previous[1]
            previous = current

    def test_deterministic_with_seed(self) -> None:
        first = list(TenantGenerator(seed=7).generate_batch(1_000, 5))
        second = list(TenantGenerator(seed=7).generate_batch(1_000, 5))

        assert [t.name for t in first] == [t.name for t in second]
        assert [t.credit_score for t in first] == [t.credit_score for t in second]


class TestLeaseApplications:
    """Tests for TenantGenerator.generate_lease_applications."""

    def test_count_and_fee(self, seed: int) -> None:
        gen = TenantGenerator(seed=seed)

        applications = gen.generate_lease_applications(1_500, 4, application_date=TODAY)

        assert len(applications) == 4
        for application in applications:
            assert application.application_fee == 50
            assert application.application_date == TODAY
            assert application.desired_lease_length in (6, 12, 18, 24)
            assert application.tenant.rent_amount == 1_500

    def test_invalid_rent_returns_empty(self, seed: int, caplog: pytest.LogCaptureFixture) -> None:
        gen = TenantGenerator(seed=seed)

        with caplog.at_level(logging.ERROR, logger="estate_sim"):
            assert gen.generate_lease_applications(0, 3) == []

        assert "Invalid rent price" in caplog.text

    def test_positive_quality_shift(self, seed: int) -> None:
        gen = TenantGenerator(seed=seed)

        applications = gen.generate_lease_applications(1_500, 30, quality_modifier=1.0)

        assert all(700 <= a.tenant.credit_score <= 850 for a in applications)

    def test_negative_quality_shift(self, seed: int) -> None:
        gen = TenantGenerator(seed=seed)

        applications = gen.generate_lease_applications(1_500, 30, quality_modifier=-1.0)

        assert all(500 <= a.tenant.credit_score <= 600 for a in applications)

    def test_probabilities_follow_redrawn_score(self, seed: int) -> None:
        gen = TenantGenerator(seed=seed)

        for application in gen.generate_lease_applications(1_500, 10):
            tenant = application.tenant
            expected = min(0.95, 0.6 + tenant.credit_score / 1000 * 0.5)
            assert tenant.property_care_probability == pytest.approx(expected)


class TestTenantEventProbability:
    """Tests for calculate_tenant_event_probability."""

    def test_rent_paid_uses_payment_probability(self) -> None:
        tenant = build_tenant(payment_probability=0.77)

        assert calculate_tenant_event_probability(tenant, TenantEventType.RENT_PAID) == 0.77

    def test_damage_modifiers_compound(self) -> None:
        tenant = build_tenant(pets=True, family_size=4, property_care_probability=0.95)

        assert calculate_tenant_event_probability(tenant, TenantEventType.DAMAGE) == pytest.approx(0.054)

        tenant.property_care_probability = 0.6
        assert calculate_tenant_event_probability(tenant, TenantEventType.DAMAGE) == pytest.approx(0.081)

    def test_damage_capped(self) -> None:
        tenant = build_tenant(pets=True, family_size=4, property_care_probability=0.1)
        for _ in range(3):
            assert calculate_tenant_event_probability(tenant, TenantEventType.DAMAGE) <= 0.20

    def test_lease_break(self) -> None:
        restless = build_tenant(rental_history=RentalHistory(0, Rating.GOOD, 5, 4))
        settled = build_tenant(rental_history=RentalHistory(0, Rating.GOOD, 5, 1))

        assert calculate_tenant_event_probability(restless, TenantEventType.LEASE_BREAK) == pytest.approx(0.03)
        assert calculate_tenant_event_probability(settled, TenantEventType.LEASE_BREAK) == pytest.approx(0.02)

    def test_base_probabilities(self) -> None:
        tenant = build_tenant()

        assert calculate_tenant_event_probability(tenant, TenantEventType.COMPLAINT) == 0.04
        assert calculate_tenant_event_probability(tenant, TenantEventType.RENT_LATE) == 0.10
        assert calculate_tenant_event_probability(tenant, TenantEventType.RENEWAL) == 0.0


class TestPropertyGenerator:
    """Tests for PropertyGenerator."""

    @pytest.fixture
    def batch(self, seed: int) -> list:
        return list(PropertyGenerator(seed=seed).generate_batch(300, TODAY))

    def test_ids_are_sequential(self, batch: list) -> None:
        assert [p.property_id for p in batch] == list(range(1, 301))

    def test_type_allowed_for_location(self, batch: list) -> None:
        for prop in batch:
            assert prop.property_type in LOCATION_PROPERTY_TYPES[prop.location]

    def test_rooms_absent_only_for_land(self, batch: list) -> None:
        for prop in batch:
            assert (prop.rooms is None) == (prop.property_type == PropertyType.LAND)
            if prop.rooms is not None:
                assert prop.rooms >= 1

    def test_land_sizes(self, batch: list) -> None:
        for prop in batch:
            if prop.property_type == PropertyType.LAND:
                assert prop.size >= 1000

    def test_numeric_ranges(self, batch: list) -> None:
        for prop in batch:
            assert 0 <= prop.renovation_bonus_percentage <= 100
            assert prop.value > 0
            assert prop.value * 0.9 - 1 <= prop.market_price <= prop.value * 1.1
            assert prop.rent_price >= 0
            assert prop.maintenance_costs >= prop.size * 0.5 - 1
            assert prop.property_tax >= 0
            assert 1 <= prop.time_on_market <= 90
            assert prop.building_date <= TODAY
            assert prop.listed_date == TODAY

    def test_amenity_scores(self, batch: list) -> None:
        for prop in batch:
            a = prop.amenities
            for score in (a.schools, a.parks, a.shopping, a.transportation, a.healthcare):
                assert 0 <= score <= 5

    def test_lot_size_only_for_lot_types(self, batch: list) -> None:
        for prop in batch:
            assert (prop.lot_size is not None) == (prop.property_type in LOT_MULTIPLIERS)

    def test_new_listings_are_unowned(self, batch: list) -> None:
        for prop in batch:
            assert prop.owner is None
            assert prop.current_tenant is None
            assert prop.is_new

    def test_description_mentions_location(self, batch: list) -> None:
        for prop in batch:
            assert prop.location.value in prop.description
            assert prop.address.endswith(prop.location.value)

    def test_deterministic_with_seed(self) -> None:
        first = generate_random_properties(25, seed=11, today=TODAY)
        second = generate_random_properties(25, seed=11, today=TODAY)

        assert [(p.address, p.value, p.rent_price) for p in first] == [
            (p.address, p.value, p.rent_price) for p in second
        ]

    def test_generate_random_property(self) -> None:
        prop = generate_random_property(99, rng=random.Random(3), today=TODAY)

        assert prop.property_id == 99


class TestMarketTrends:
    """Tests for comparative market statistics."""

    def test_comparables_drive_supply_and_days(self, seed: int) -> None:
        existing = [
            build_property(property_id=1, time_on_market=10),
            build_property(property_id=2, time_on_market=20),
            build_property(property_id=3, time_on_market=32),
            own(build_property(property_id=4, time_on_market=0)),
            build_property(property_id=5, location=Location.URBAN, time_on_market=90),
        ]
        gen = PropertyGenerator(seed=seed)

        trends = gen._generate_market_trends(Location.SUBURBAN, PropertyType.HOUSE, existing, TODAY)

        assert trends.property_supply == 3
        # ceil((10 + 20 + 32 + 0) / 4)
        assert trends.average_days_on_market == 16
        assert trends.seasonality == 1.1

    def test_days_on_market_floor(self, seed: int) -> None:
        existing = [build_property(time_on_market=1)]
        gen = PropertyGenerator(seed=seed)

        trends = gen._generate_market_trends(Location.SUBURBAN, PropertyType.HOUSE, existing, TODAY)

        assert trends.average_days_on_market == 5

    def test_no_comparables(self, seed: int) -> None:
        gen = PropertyGenerator(seed=seed)

        trends = gen._generate_market_trends(Location.COUNTRY, PropertyType.CABIN, [], TODAY)

        assert 5 <= trends.property_supply <= 29
        assert 20 <= trends.average_days_on_market <= 79

    @pytest.mark.parametrize(
        "month, expected",
        [(1, 0.9), (4, 1.1), (7, 1.0), (10, 1.05), (12, 0.9)],
    )
    def test_seasonality(self, month: int, expected: float) -> None:
        assert seasonality_for_month(month) == expected
