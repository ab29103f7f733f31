"""Single in-memory world state shared by the clock and player commands."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from datetime import date, timedelta
from decimal import Decimal

from estate_sim.config import BankConfig, SimulationConfig
from estate_sim.exceptions import InvalidEntityStateError, PropertyNotFoundError
from estate_sim.models import (
    CapitalGainRecord,
    GameEvent,
    LoanState,
    Notice,
    Property,
    TaxLedger,
)
from estate_sim.utils import add_months, to_money


def initial_loan_state(bank: BankConfig, today: date) -> LoanState:
    """Debt-free bank relationship at the configured starting terms."""
    return LoanState(
        total_debt=Decimal("0.00"),
        monthly_repayment=Decimal("0.00"),
        base_interest_rate=bank.initial_interest_rate,
        next_rate_change_date=add_months(today, bank.rate_review_months),
        credit_score=bank.initial_credit_score,
        max_loan_amount=to_money(bank.initial_max_loan),
        max_loan_to_value_ratio=bank.initial_max_ltv,
    )


@dataclass
class WorldState:
    """In-memory store for the simulated world.

    Holds the property market, the player's cash and debt, the event log and
    the bounded notice/sale logs. It carries no locking itself; the
    simulation serializes every access.
    """

    current_date: date
    cash: Decimal
    loan: LoanState
    properties: dict[int, Property] = field(default_factory=dict)
    events: list[GameEvent] = field(default_factory=list)
    outsourced: set[int] = field(default_factory=set)
    manager_hired: bool = False
    tax_ledger: TaxLedger = field(default_factory=TaxLedger)
    capital_gains: deque[CapitalGainRecord] = field(default_factory=lambda: deque(maxlen=10))
    notices: deque[Notice] = field(default_factory=lambda: deque(maxlen=50))
    paused: bool = False
    tick_rate_ms: int = 5000

    @classmethod
    def new(cls, config: SimulationConfig, today: date) -> WorldState:
        """Fresh world with starting cash and no properties."""
        return cls(
            current_date=today,
            cash=to_money(config.starting_cash),
            loan=initial_loan_state(config.bank, today),
            capital_gains=deque(maxlen=config.capital_gains_log_size),
            notices=deque(maxlen=config.notice_log_size),
            tick_rate_ms=config.tick_rate_ms,
        )

    def add_property(self, prop: Property) -> None:
        """Add a property to the market."""
        if prop.property_id in self.properties:
            raise InvalidEntityStateError(f"Property {prop.property_id} already exists")
        self.properties[prop.property_id] = prop

    def get_property(self, property_id: int) -> Property:
        """Get a property by id.

        Raises
        ------
        PropertyNotFoundError
            If no property has that id.
        """
        try:
            return self.properties[property_id]
        except KeyError:
            raise PropertyNotFoundError(f"Property {property_id} not found") from None

    def owned_properties(self) -> list[Property]:
        return [p for p in self.properties.values() if p.is_owned]

    def listed_properties(self) -> list[Property]:
        return [p for p in self.properties.values() if not p.is_owned]

    def rented_properties(self) -> list[Property]:
        return [p for p in self.owned_properties() if p.is_rented]

    def total_asset_value(self) -> float:
        """Current value of the player's portfolio."""
        return sum(p.value for p in self.owned_properties())

    def is_outsourced(self, property_id: int) -> bool:
        return property_id in self.outsourced

    def add_notice(self, message: str, level: str = "info") -> Notice:
        notice = Notice(date=self.current_date, message=message, level=level)
        self.notices.append(notice)
        return notice

    def advance_day(self) -> date:
        self.current_date += timedelta(days=1)
        return self.current_date

    def summary(self) -> dict[str, Decimal | float | int | str]:
        """Get summary statistics of the world."""
        owned = self.owned_properties()
        return {
            "date": self.current_date.isoformat(),
            "cash": self.cash,
            "properties": len(self.properties),
            "owned": len(owned),
            "rented": sum(1 for p in owned if p.is_rented),
            "portfolio_value": self.total_asset_value(),
            "debt": self.loan.total_debt,
            "interest_rate": self.loan.base_interest_rate,
            "credit_score": self.loan.credit_score,
            "active_events": sum(1 for e in self.events if e.is_active),
        }
