"""Pytest configuration and fixtures."""

import random
from datetime import date

import pytest

from estate_sim.config import SimulationConfig
from estate_sim.models import (
    PLAYER,
    Amenities,
    EconomicIndicators,
    IntendedPurpose,
    Location,
    MarketTrends,
    NeighborhoodQuality,
    Occupation,
    Property,
    PropertyType,
    Rating,
    RenovationPotential,
    RentalHistory,
    SpecialFeatures,
    Tenant,
    ViewQuality,
)
from estate_sim.simulation import Simulation
from estate_sim.store import WorldState


class FixedRandom(random.Random):
    """Random stream whose ``random()`` always returns the same value."""

    def __init__(self, value: float) -> None:
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


def build_property(**overrides) -> Property:
    """Property with neutral attributes; override any field by keyword."""
    values = dict(
        property_id=1,
        address="1 Main St, Suburban",
        adjective="Cozy",
        description="Cozy House with 3 rooms located in Suburban.",
        property_type=PropertyType.HOUSE,
        location=Location.SUBURBAN,
        size=100,
        rooms=3,
        building_date=date(2000, 1, 1),
        intended_purpose=IntendedPurpose.HOUSING,
        neighborhood_quality=NeighborhoodQuality.AVERAGE,
        view_quality=ViewQuality.NONE,
        amenities=Amenities(3, 3, 3, 3, 3),
        special_features=SpecialFeatures(),
        renovation_potential=RenovationPotential.NONE,
        economic_indicators=EconomicIndicators(5.0, 1.0, 100_000, 50_000),
        market_trends=MarketTrends(0.0, 10, 30, 1.0),
        value=300_000,
        market_price=300_000,
        renovation_bonus_percentage=50,
        maintenance_costs=500,
        rent_price=2_000,
        property_tax=350,
        listed_date=date(2025, 1, 1),
    )
    values.update(overrides)
    return Property(**values)


def build_tenant(**overrides) -> Tenant:
    """Reliable tenant; override any field by keyword."""
    values = dict(
        tenant_id="tenant-1",
        name="Alex Doe",
        occupation=Occupation.ENGINEER,
        monthly_income=20_000,
        credit_score=750,
        family_size=2,
        pets=False,
        smoker=False,
        rental_history=RentalHistory(0, Rating.GOOD, 5, 1),
        references=Rating.GOOD,
        lease_length=12,
        planned_stay_duration=12,
        rent_amount=2_000,
        payment_probability=1.0,
        property_care_probability=0.95,
    )
    values.update(overrides)
    return Tenant(**values)


def own(prop: Property, purchase_date: date = date(2025, 1, 1)) -> Property:
    prop.owner = PLAYER
    prop.purchase_date = purchase_date
    return prop


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def start_date() -> date:
    return date(2025, 1, 15)


@pytest.fixture
def config(seed: int) -> SimulationConfig:
    """Config with random tenant incidents switched off."""
    return SimulationConfig(seed=seed, tenant_event_chance=0.0, charge_maintenance=False)


@pytest.fixture
def world(config: SimulationConfig, start_date: date) -> WorldState:
    return WorldState.new(config, start_date)


@pytest.fixture
def sim(world: WorldState, config: SimulationConfig, seed: int) -> Simulation:
    return Simulation(world, config, rng=random.Random(seed))
