"""Base models shared across the engine."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from estate_sim.exceptions import CommandRejectedError
from estate_sim.utils import to_money


@dataclass
class CommandResult:
    """Outcome of a player command.

    ``success`` is False for validation rejections, probabilistic denials
    and not-found no-ops alike; the message is empty for the latter.
    """

    success: bool
    message: str = ""
    money_change: Decimal = Decimal("0.00")

    @classmethod
    def ok(cls, message: str, money_change: Decimal | float = 0) -> "CommandResult":
        return cls(True, message, to_money(money_change))

    @classmethod
    def rejected(cls, message: str) -> "CommandResult":
        return cls(False, message)

    @classmethod
    def noop(cls) -> "CommandResult":
        return cls(False)

    def raise_for_status(self) -> None:
        """Raise CommandRejectedError unless the command succeeded."""
        if not self.success:
            raise CommandRejectedError(self.message or "Command had no effect")


@dataclass
class Notice:
    """User-facing message raised by the state machine."""

    date: date
    message: str
    level: str = "info"  # info | warning
