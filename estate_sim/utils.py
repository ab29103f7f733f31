"""Date and money helpers for simulated time."""

import calendar
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

CENTS = Decimal("0.01")


def to_money(amount: Decimal | float | int) -> Decimal:
    """Quantize an amount to cents."""
    return Decimal(str(amount)).quantize(CENTS, rounding=ROUND_HALF_UP)


def add_months(day: date, months: int) -> date:
    """Shift ``day`` by whole months, clamping to the end of shorter months."""
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def holding_months(start: date, end: date) -> int:
    """Whole months held, counting 30 days per month."""
    return round((end - start).days / 30)


def months_between(start: date, end: date) -> int:
    """Calendar months from ``start`` to ``end``."""
    return (end.year - start.year) * 12 + end.month - start.month
