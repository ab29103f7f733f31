"""Tests for the world state store."""

from datetime import date

import pytest

from conftest import build_property, build_tenant, own
from estate_sim.exceptions import InvalidEntityStateError, PropertyNotFoundError
from estate_sim.store import WorldState


class TestWorldState:
    """Tests for WorldState."""

    def test_new(self, world: WorldState) -> None:
        assert world.current_date == date(2025, 1, 15)
        assert world.cash == 250_000
        assert world.loan.credit_score == 600
        assert world.loan.base_interest_rate == 0.05
        assert world.loan.next_rate_change_date == date(2025, 4, 15)
        assert world.properties == {}

    def test_add_and_get(self, world: WorldState) -> None:
        prop = build_property(property_id=4)
        world.add_property(prop)

        assert world.get_property(4) is prop

    def test_duplicate_id_rejected(self, world: WorldState) -> None:
        world.add_property(build_property())

        with pytest.raises(InvalidEntityStateError):
            world.add_property(build_property())

    def test_missing_property(self, world: WorldState) -> None:
        with pytest.raises(PropertyNotFoundError, match="Property 8 not found"):
            world.get_property(8)

    def test_partitions(self, world: WorldState) -> None:
        rented = own(build_property(property_id=1))
        rented.current_tenant = build_tenant()
        vacant = own(build_property(property_id=2, value=100_000))
        listed = build_property(property_id=3)
        for prop in (rented, vacant, listed):
            world.add_property(prop)

        assert world.owned_properties() == [rented, vacant]
        assert world.listed_properties() == [listed]
        assert world.rented_properties() == [rented]
        assert world.total_asset_value() == 400_000

    def test_notices_are_bounded(self, world: WorldState) -> None:
        for i in range(60):
            world.add_notice(f"notice {i}")

        assert len(world.notices) == 50
        assert world.notices[0].message == "notice 10"
        assert world.notices[-1].date == world.current_date

    def test_advance_day(self, world: WorldState) -> None:
        assert world.advance_day() == date(2025, 1, 16)

    def test_summary(self, world: WorldState) -> None:
        world.add_property(own(build_property()))

        summary = world.summary()

        assert summary["date"] == "2025-01-15"
        assert summary["owned"] == 1
        assert summary["rented"] == 0
        assert summary["portfolio_value"] == 300_000
        assert summary["active_events"] == 0
