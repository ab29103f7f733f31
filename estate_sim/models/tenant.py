"""Tenant, lease application and tenant event models."""

from dataclasses import dataclass
from datetime import date

from estate_sim.models.enums import Occupation, Rating, TenantEventType


@dataclass
class RentalHistory:
    """Tenant's record as a renter."""

    evictions: int
    previous_landlord_reviews: Rating
    years_of_rental_history: int
    times_moved_last_five_years: int


@dataclass
class Tenant:
    """Prospective or current tenant."""

    tenant_id: str
    name: str
    occupation: Occupation
    monthly_income: int
    credit_score: int  # 350-850
    family_size: int
    pets: bool
    smoker: bool
    rental_history: RentalHistory
    references: Rating
    lease_length: int  # months, initial term
    planned_stay_duration: int  # months the tenant actually intends to stay
    rent_amount: int
    payment_probability: float  # 0-1
    property_care_probability: float  # 0-1
    has_notified_departure: bool = False
    is_paying: bool = True
    lease_start: date | None = None


@dataclass
class LeaseApplication:
    """Proposed tenancy waiting for the landlord's decision."""

    tenant: Tenant
    desired_lease_length: int
    application_date: date
    application_fee: float


@dataclass
class TenantEvent:
    """Entry in a property's tenant log."""

    event_type: TenantEventType
    date: date
    description: str
    financial_impact: float  # positive for rent, negative for costs
    property_impact: float | None = None
