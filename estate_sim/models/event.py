"""Game event templates, instances and their impacts."""

from dataclasses import dataclass, field
from datetime import date

from estate_sim.models.enums import (
    EventCategory,
    EventImpactType,
    EventSeverity,
    Location,
    PropertyType,
)


@dataclass(frozen=True)
class EventImpact:
    """Signed magnitude for one impact type.

    Empty filters match every area / property type.
    """

    impact_type: EventImpactType
    value: float
    affected_areas: tuple[Location, ...] = ()
    affected_property_types: tuple[PropertyType, ...] = ()

    def matches(
        self,
        impact_type: EventImpactType,
        area: Location | None = None,
        property_type: PropertyType | None = None,
    ) -> bool:
        if self.impact_type != impact_type:
            return False
        if self.affected_areas and area is not None and area not in self.affected_areas:
            return False
        if (
            self.affected_property_types
            and property_type is not None
            and property_type not in self.affected_property_types
        ):
            return False
        return True


@dataclass(frozen=True)
class EventChoice:
    choice_id: str
    description: str
    impacts: tuple[EventImpact, ...] = ()
    required_money: float | None = None


@dataclass(frozen=True)
class EventTemplate:
    """Immutable library entry that instances are stamped from."""

    event_id: str
    title: str
    description: str
    severity: EventSeverity
    category: EventCategory
    duration: int  # months
    probability: float  # per check
    impacts: tuple[EventImpact, ...] = ()
    choices: tuple[EventChoice, ...] = ()
    related_events: tuple[str, ...] = ()
    detailed_description: str = ""


@dataclass
class GameEvent:
    """Spawned event instance, kept in the log after it expires."""

    event_id: str  # "<template id>-<suffix>"
    template_id: str
    title: str
    description: str
    severity: EventSeverity
    category: EventCategory
    duration: int
    impacts: list[EventImpact]
    choices: list[EventChoice]
    related_events: list[str]
    start_date: date
    end_date: date
    is_active: bool = True
    selected_choice: str | None = None
    detailed_description: str = ""

    def get_choice(self, choice_id: str) -> EventChoice | None:
        for choice in self.choices:
            if choice.choice_id == choice_id:
                return choice
        return None

    def active_impacts(self) -> list[EventImpact]:
        """Own impacts plus those of the selected choice, if any."""
        impacts = list(self.impacts)
        if self.selected_choice is not None:
            choice = self.get_choice(self.selected_choice)
            if choice is not None:
                impacts.extend(choice.impacts)
        return impacts
