"""Built-in event templates."""

from estate_sim.models.enums import (
    EventCategory,
    EventImpactType,
    EventSeverity,
    Location,
)
from estate_sim.models.event import EventChoice, EventImpact, EventTemplate

ECONOMIC_BOOM = EventTemplate(
    event_id="economic-boom",
    title="Economic Boom",
    description="The economy is booming! Property values are rising and banks are more willing to lend.",
    detailed_description=(
        "Strong job growth and rising wages are lifting demand across the housing market. "
        "Banks loosen lending standards and better-qualified tenants enter the rental pool."
    ),
    severity=EventSeverity.MAJOR,
    category=EventCategory.ECONOMIC,
    duration=24,
    probability=0.01,
    impacts=(
        EventImpact(EventImpactType.INTEREST_RATE, -0.01),
        EventImpact(EventImpactType.LOAN_APPROVAL, 0.2),
        EventImpact(EventImpactType.MAX_LOAN_AMOUNT, 0.15),
        EventImpact(EventImpactType.TENANT_QUALITY, 0.1),
        EventImpact(EventImpactType.PROPERTY_VALUE, 0.03),
    ),
)

RECESSION = EventTemplate(
    event_id="recession",
    title="Economic Recession",
    description="The economy has entered a recession. Lending is tighter and tenants are struggling.",
    detailed_description=(
        "Rising unemployment squeezes household budgets. Banks raise rates and cut credit "
        "limits while property values soften."
    ),
    severity=EventSeverity.MAJOR,
    category=EventCategory.ECONOMIC,
    duration=18,
    probability=0.008,
    impacts=(
        EventImpact(EventImpactType.INTEREST_RATE, 0.015),
        EventImpact(EventImpactType.LOAN_APPROVAL, -0.25),
        EventImpact(EventImpactType.MAX_LOAN_AMOUNT, -0.2),
        EventImpact(EventImpactType.TENANT_QUALITY, -0.15),
        EventImpact(EventImpactType.PROPERTY_VALUE, -0.01),
    ),
    related_events=("foreclosure-wave", "tenant-payment-issues"),
)

NATURAL_DISASTER = EventTemplate(
    event_id="natural-disaster",
    title="Natural Disaster",
    description="A severe storm has damaged properties across the region.",
    detailed_description=(
        "Repair crews are in short supply, pushing up maintenance and renovation costs. "
        "How the community responds will shape the recovery."
    ),
    severity=EventSeverity.MAJOR,
    category=EventCategory.ENVIRONMENTAL,
    duration=6,
    probability=0.005,
    impacts=(
        EventImpact(EventImpactType.PROPERTY_VALUE, -0.1),
        EventImpact(EventImpactType.MAINTENANCE_COST, 0.25),
        EventImpact(EventImpactType.RENOVATION_COST, 0.2),
    ),
    choices=(
        EventChoice(
            choice_id="invest-recovery",
            description="Invest in community recovery efforts",
            impacts=(EventImpact(EventImpactType.PROPERTY_VALUE, 0.05),),
            required_money=50_000,
        ),
        EventChoice(
            choice_id="minimal-response",
            description="Make only the required repairs",
            impacts=(EventImpact(EventImpactType.TENANT_QUALITY, -0.1),),
        ),
    ),
)

LOCAL_BUSINESS_GROWTH = EventTemplate(
    event_id="local-business-growth",
    title="Local Business Growth",
    description="New businesses are opening in the city center, attracting residents.",
    severity=EventSeverity.MINOR,
    category=EventCategory.ECONOMIC,
    duration=12,
    probability=0.03,
    impacts=(
        EventImpact(
            EventImpactType.PROPERTY_VALUE,
            0.02,
            affected_areas=(Location.DOWNTOWN, Location.URBAN),
        ),
        EventImpact(
            EventImpactType.TENANT_QUALITY,
            0.05,
            affected_areas=(Location.DOWNTOWN, Location.URBAN),
        ),
    ),
)

INFRASTRUCTURE_IMPROVEMENT = EventTemplate(
    event_id="infrastructure-improvement",
    title="Infrastructure Improvement",
    description="The government is investing in suburban roads and public transport.",
    severity=EventSeverity.MINOR,
    category=EventCategory.POLITICAL,
    duration=18,
    probability=0.02,
    impacts=(
        EventImpact(EventImpactType.PROPERTY_VALUE, 0.015, affected_areas=(Location.SUBURBAN,)),
        EventImpact(EventImpactType.AREA_QUALITY, 0.1, affected_areas=(Location.SUBURBAN,)),
    ),
)

TENANT_PAYMENT_ISSUES = EventTemplate(
    event_id="tenant-payment-issues",
    title="Tenant Payment Issues",
    description="Rising living costs are making it harder for tenants to pay rent on time.",
    severity=EventSeverity.MINOR,
    category=EventCategory.ECONOMIC,
    duration=3,
    probability=0.015,
    impacts=(EventImpact(EventImpactType.TENANT_QUALITY, -0.2),),
)

EVENT_LIBRARY: dict[str, EventTemplate] = {
    template.event_id: template
    for template in (
        ECONOMIC_BOOM,
        RECESSION,
        NATURAL_DISASTER,
        LOCAL_BUSINESS_GROWTH,
        INFRASTRUCTURE_IMPROVEMENT,
        TENANT_PAYMENT_ISSUES,
    )
}

# Template ids that may not be active at the same time
CONTRADICTIONS: dict[str, frozenset[str]] = {
    "economic-boom": frozenset({"recession"}),
    "recession": frozenset({"economic-boom"}),
}
