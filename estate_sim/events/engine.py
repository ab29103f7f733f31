"""Event lifecycle: spawning, expiry, related cascades, impacts and choices."""

from __future__ import annotations

import logging
import random
import string
from collections.abc import Iterable, Mapping
from datetime import date, timedelta
from decimal import Decimal

from estate_sim.events.library import CONTRADICTIONS, EVENT_LIBRARY
from estate_sim.exceptions import EventNotFoundError
from estate_sim.models.base import CommandResult
from estate_sim.models.enums import EventImpactType, Location, PropertyType
from estate_sim.models.event import EventTemplate, GameEvent

logger = logging.getLogger(__name__)

RELATED_EVENT_PROBABILITY = 0.25
DAYS_PER_MONTH = 30
ID_SUFFIX_LENGTH = 8
_SUFFIX_ALPHABET = string.ascii_lowercase + string.digits


def instantiate(template: EventTemplate, now: date, rng: random.Random) -> GameEvent:
    """Stamp a new active instance from ``template``.

    The instance gets its own lists; the template's tuples are never shared
    as mutable state.
    """
    suffix = "".join(rng.choices(_SUFFIX_ALPHABET, k=ID_SUFFIX_LENGTH))
    return GameEvent(
        event_id=f"{template.event_id}-{suffix}",
        template_id=template.event_id,
        title=template.title,
        description=template.description,
        severity=template.severity,
        category=template.category,
        duration=template.duration,
        impacts=list(template.impacts),
        choices=list(template.choices),
        related_events=list(template.related_events),
        start_date=now,
        end_date=now + timedelta(days=template.duration * DAYS_PER_MONTH),
        detailed_description=template.detailed_description,
    )


def active_template_ids(events: Iterable[GameEvent]) -> set[str]:
    return {event.template_id for event in events if event.is_active}


def can_spawn(
    template_id: str,
    active_ids: set[str],
    contradictions: Mapping[str, frozenset[str]] = CONTRADICTIONS,
) -> bool:
    """A template spawns only when neither it nor a contradicting template is active."""
    if template_id in active_ids:
        return False
    return not (contradictions.get(template_id, frozenset()) & active_ids)


def update_active_events(events: Iterable[GameEvent], now: date) -> list[GameEvent]:
    """Deactivate instances past their end date; return the ones that expired."""
    expired = []
    for event in events:
        if event.is_active and now > event.end_date:
            event.is_active = False
            expired.append(event)
            logger.info("Event expired: %s", event.event_id)
    return expired


def check_for_new_events(
    events: list[GameEvent],
    now: date,
    rng: random.Random,
    library: Mapping[str, EventTemplate] = EVENT_LIBRARY,
    contradictions: Mapping[str, frozenset[str]] = CONTRADICTIONS,
) -> list[GameEvent]:
    """Roll every eligible template once; append and return new instances."""
    spawned = []
    active_ids = active_template_ids(events)
    for template in library.values():
        if not can_spawn(template.event_id, active_ids, contradictions):
            continue
        if rng.random() < template.probability:
            event = instantiate(template, now, rng)
            events.append(event)
            spawned.append(event)
            active_ids.add(template.event_id)
            logger.info("Event started: %s (%s)", event.title, event.event_id)
    return spawned


def check_for_related_events(
    events: list[GameEvent],
    now: date,
    rng: random.Random,
    library: Mapping[str, EventTemplate] = EVENT_LIBRARY,
    contradictions: Mapping[str, frozenset[str]] = CONTRADICTIONS,
) -> list[GameEvent]:
    """Give each related template of every active instance a chance to spawn.

    Related ids without a template in ``library`` are skipped.
    """
    spawned = []
    active_ids = active_template_ids(events)
    parents = [event for event in events if event.is_active and event.related_events]
    for parent in parents:
        for related_id in parent.related_events:
            template = library.get(related_id)
            if template is None:
                logger.debug("No template for related event %s", related_id)
                continue
            if not can_spawn(related_id, active_ids, contradictions):
                continue
            if rng.random() < RELATED_EVENT_PROBABILITY:
                event = instantiate(template, now, rng)
                events.append(event)
                spawned.append(event)
                active_ids.add(related_id)
                logger.info("Related event started: %s (from %s)", event.event_id, parent.event_id)
    return spawned


def calculate_event_impact(
    events: Iterable[GameEvent],
    impact_type: EventImpactType,
    area: Location | None = None,
    property_type: PropertyType | None = None,
) -> float:
    """Sum matching impacts across active events and their selected choices.

    Parameters
    ----------
    events : Iterable[GameEvent]
        Event log; inactive instances are ignored.
    impact_type : EventImpactType
        Impact type to aggregate.
    area : Location | None
        Area to filter on; ``None`` matches every area filter.
    property_type : PropertyType | None
        Property type to filter on; ``None`` matches every type filter.

    Returns
    -------
    float
        Signed total, 0.0 when nothing matches.
    """
    total = 0.0
    for event in events:
        if not event.is_active:
            continue
        for impact in event.active_impacts():
            if impact.matches(impact_type, area, property_type):
                total += impact.value
    return total


def select_event_choice(
    events: Iterable[GameEvent],
    event_id: str,
    choice_id: str,
    player_money: Decimal | float,
) -> CommandResult:
    """Record a choice on an event instance.

    On success ``money_change`` is the negated required money (0 when the
    choice is free). Events are only mutated on success.
    """
    event = next((e for e in events if e.event_id == event_id), None)
    if event is None:
        return CommandResult.rejected("Event not found.")
    if not event.choices:
        return CommandResult.rejected("This event has no choices.")

    choice = event.get_choice(choice_id)
    if choice is None:
        return CommandResult.rejected("Choice not found.")

    required = choice.required_money or 0
    if required and player_money < required:
        return CommandResult.rejected(f"Not enough money. This choice requires ${required:,.0f}.")

    event.selected_choice = choice_id
    logger.info("Choice %s selected for event %s", choice_id, event_id)
    return CommandResult.ok(f"You chose: {choice.description}", money_change=-required)


class EventEngine:
    """Owns the event log and the random stream that drives it.

    Parameters
    ----------
    rng : random.Random | None
        Random stream for spawn rolls and id suffixes.
    library : Mapping[str, EventTemplate] | None
        Templates to draw from (the built-in library by default).
    contradictions : Mapping[str, frozenset[str]] | None
        Mutually exclusive template ids.
    events : list[GameEvent] | None
        Event log to manage in place (a new list by default).
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        library: Mapping[str, EventTemplate] | None = None,
        contradictions: Mapping[str, frozenset[str]] | None = None,
        events: list[GameEvent] | None = None,
    ) -> None:
        self.rng = rng or random.Random()
        self.library = EVENT_LIBRARY if library is None else library
        self.contradictions = CONTRADICTIONS if contradictions is None else contradictions
        self.events: list[GameEvent] = [] if events is None else events

    @property
    def active_events(self) -> list[GameEvent]:
        return [event for event in self.events if event.is_active]

    def get_event(self, event_id: str) -> GameEvent:
        """Look up an instance by id.

        Raises
        ------
        EventNotFoundError
            If no instance has that id.
        """
        for event in self.events:
            if event.event_id == event_id:
                return event
        raise EventNotFoundError(f"Event {event_id} not found")

    def check(self, now: date) -> list[GameEvent]:
        """Expire, spawn, then cascade related events; return what spawned."""
        update_active_events(self.events, now)
        spawned = check_for_new_events(self.events, now, self.rng, self.library, self.contradictions)
        spawned += check_for_related_events(self.events, now, self.rng, self.library, self.contradictions)
        return spawned

    def trigger(self, template_id: str, now: date) -> GameEvent | None:
        """Force-spawn a template, still honoring exclusivity."""
        template = self.library.get(template_id)
        if template is None:
            logger.warning("Unknown event template: %s", template_id)
            return None
        if not can_spawn(template_id, active_template_ids(self.events), self.contradictions):
            return None
        event = instantiate(template, now, self.rng)
        self.events.append(event)
        logger.info("Event started: %s (%s)", event.title, event.event_id)
        return event

    def impact(
        self,
        impact_type: EventImpactType,
        area: Location | None = None,
        property_type: PropertyType | None = None,
    ) -> float:
        return calculate_event_impact(self.events, impact_type, area, property_type)

    def select_choice(self, event_id: str, choice_id: str, player_money: Decimal | float) -> CommandResult:
        return select_event_choice(self.events, event_id, choice_id, player_money)
