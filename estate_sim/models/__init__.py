"""Domain models for the simulation engine."""

from estate_sim.models.bank import LoanState, PaymentRecord, RateChange, RateProtection
from estate_sim.models.base import CommandResult, Notice
from estate_sim.models.enums import (
    EventCategory,
    EventImpactType,
    EventSeverity,
    IntendedPurpose,
    Location,
    NeighborhoodQuality,
    Occupation,
    PriceTier,
    PropertyType,
    Rating,
    RenovationPotential,
    TenantEventType,
    ViewQuality,
)
from estate_sim.models.event import EventChoice, EventImpact, EventTemplate, GameEvent
from estate_sim.models.ledger import CapitalGainRecord, TaxLedger
from estate_sim.models.property import (
    PLAYER,
    Amenities,
    EconomicIndicators,
    MarketTrends,
    Property,
    PropertyExtras,
    SpecialFeatures,
)
from estate_sim.models.tenant import LeaseApplication, RentalHistory, Tenant, TenantEvent

__all__ = [
    "PLAYER",
    "Amenities",
    "CapitalGainRecord",
    "CommandResult",
    "EconomicIndicators",
    "EventCategory",
    "EventChoice",
    "EventImpact",
    "EventImpactType",
    "EventSeverity",
    "EventTemplate",
    "GameEvent",
    "IntendedPurpose",
    "LeaseApplication",
    "LoanState",
    "Location",
    "MarketTrends",
    "NeighborhoodQuality",
    "Notice",
    "Occupation",
    "PaymentRecord",
    "PriceTier",
    "Property",
    "PropertyExtras",
    "PropertyType",
    "RateChange",
    "RateProtection",
    "Rating",
    "RenovationPotential",
    "RentalHistory",
    "SpecialFeatures",
    "TaxLedger",
    "Tenant",
    "TenantEvent",
    "TenantEventType",
    "ViewQuality",
]
