"""Game events: template library and lifecycle engine."""

from estate_sim.events.engine import (
    EventEngine,
    calculate_event_impact,
    check_for_new_events,
    check_for_related_events,
    instantiate,
    select_event_choice,
    update_active_events,
)
from estate_sim.events.library import CONTRADICTIONS, EVENT_LIBRARY

__all__ = [
    "CONTRADICTIONS",
    "EVENT_LIBRARY",
    "EventEngine",
    "calculate_event_impact",
    "check_for_new_events",
    "check_for_related_events",
    "instantiate",
    "select_event_choice",
    "update_active_events",
]
