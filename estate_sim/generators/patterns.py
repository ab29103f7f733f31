"""Behavioral patterns for tenants."""

from estate_sim.models.enums import TenantEventType
from estate_sim.models.tenant import Tenant

BASE_EVENT_PROBABILITIES: dict[TenantEventType, float] = {
    TenantEventType.RENT_LATE: 0.10,
    TenantEventType.RENT_MISSED: 0.05,
    TenantEventType.DAMAGE: 0.03,
    TenantEventType.LEASE_BREAK: 0.02,
    TenantEventType.COMPLAINT: 0.04,
}

MAX_DAMAGE_PROBABILITY = 0.20
MAX_LEASE_BREAK_PROBABILITY = 0.15


def calculate_tenant_event_probability(tenant: Tenant, event_type: TenantEventType) -> float:
    """Probability that ``tenant`` triggers ``event_type`` when it is rolled.

    Parameters
    ----------
    tenant : Tenant
        Tenant being evaluated.
    event_type : TenantEventType
        Kind of tenant event.

    Returns
    -------
    float
        Probability in [0, 1].
    """
    if event_type == TenantEventType.RENT_PAID:
        return tenant.payment_probability

    if event_type == TenantEventType.DAMAGE:
        probability = BASE_EVENT_PROBABILITIES[TenantEventType.DAMAGE]
        if tenant.pets:
            probability *= 1.5
        if tenant.family_size > 2:
            probability *= 1.2
        if tenant.property_care_probability < 0.7:
            probability *= 1.5
        return min(MAX_DAMAGE_PROBABILITY, probability)

    if event_type == TenantEventType.LEASE_BREAK:
        probability = BASE_EVENT_PROBABILITIES[TenantEventType.LEASE_BREAK]
        if tenant.rental_history.times_moved_last_five_years > 3:
            probability *= 1.5
        return min(MAX_LEASE_BREAK_PROBABILITY, probability)

    return BASE_EVENT_PROBABILITIES.get(event_type, 0.0)
