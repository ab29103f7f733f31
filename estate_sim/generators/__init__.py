"""World generators."""

from estate_sim.generators.base import BaseGenerator
from estate_sim.generators.patterns import calculate_tenant_event_probability
from estate_sim.generators.property import (
    PropertyGenerator,
    generate_random_properties,
    generate_random_property,
)
from estate_sim.generators.tenant import TenantGenerator

__all__ = [
    "BaseGenerator",
    "PropertyGenerator",
    "TenantGenerator",
    "calculate_tenant_event_probability",
    "generate_random_properties",
    "generate_random_property",
]
