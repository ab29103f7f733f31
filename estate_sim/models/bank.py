"""Player-scoped debt state."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from estate_sim.utils import to_money


@dataclass
class PaymentRecord:
    """Mortgage payment or early repayment."""

    date: date
    amount: Decimal
    admin_fee: Decimal


@dataclass
class RateChange:
    date: date
    rate: float


@dataclass
class RateProtection:
    """Interest-rate cap plan billed every tick while active."""

    active: bool = False
    cap_rate: float = 0.0
    monthly_cost: Decimal = Decimal("0.00")


@dataclass
class LoanState:
    """Outstanding balance and the bank relationship around it.

    Balances are ``Decimal`` amounts kept to cents; rates are plain floats.
    """

    total_debt: Decimal
    monthly_repayment: Decimal
    base_interest_rate: float
    next_rate_change_date: date
    credit_score: int  # bank relationship score, 300-850
    max_loan_amount: Decimal
    max_loan_to_value_ratio: float
    consecutive_payments: int = 0
    missed_payments: int = 0
    rate_history: list[RateChange] = field(default_factory=list)
    payment_history: list[PaymentRecord] = field(default_factory=list)
    rate_protection: RateProtection = field(default_factory=RateProtection)

    def recalculate_repayment(self) -> None:
        """Interest-only repayment at the current rate."""
        if self.total_debt > 0:
            self.monthly_repayment = to_money(self.total_debt * Decimal(str(self.base_interest_rate)) / 12)
        else:
            self.monthly_repayment = Decimal("0.00")
