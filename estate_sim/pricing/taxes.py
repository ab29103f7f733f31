"""Property, rental income and capital gains tax."""

from __future__ import annotations

from collections.abc import Iterable

from estate_sim.config import TaxConfig
from estate_sim.models.property import Property
from estate_sim.pricing.value import coerce_location

DEFAULT_TAX_CONFIG = TaxConfig()


def calculate_property_tax(
    prop: Property,
    tax_config: TaxConfig | None = None,
    impact: float = 0.0,
) -> int:
    """Monthly property tax: value × location rate / 12.

    Parameters
    ----------
    prop : Property
        Property being taxed.
    tax_config : TaxConfig | None
        Rate schedule; the default schedule when omitted.
    impact : float
        PROPERTY_TAX event impact, applied as ``(1 + impact)``.
    """
    config = tax_config or DEFAULT_TAX_CONFIG
    annual_rate = config.property_tax_rates[coerce_location(prop.location)]
    return round(prop.value * annual_rate * max(0.0, 1 + impact) / 12)


def calculate_total_property_tax(
    properties: Iterable[Property],
    tax_config: TaxConfig | None = None,
) -> int:
    """Monthly property tax over the player-owned properties."""
    return sum(calculate_property_tax(p, tax_config) for p in properties if p.is_owned)


def progressive_tax(annual_income: float, brackets: list[tuple[float, float]]) -> float:
    """Tax ``annual_income`` under ascending (threshold, rate) brackets."""
    total = 0.0
    for i, (threshold, rate) in enumerate(brackets):
        if annual_income <= threshold:
            break
        upper = brackets[i + 1][0] if i + 1 < len(brackets) else None
        taxed = annual_income - threshold if upper is None else min(annual_income, upper) - threshold
        total += taxed * rate
    return total


def calculate_rental_income_tax(
    monthly_rental_income: float,
    monthly_expenses: float,
    annual_estimate: bool = False,
    tax_config: TaxConfig | None = None,
) -> int:
    """Income tax on rental income after deductible expenses.

    Income is annualized to pick brackets; the monthly share is returned
    unless ``annual_estimate`` is set.
    """
    config = tax_config or DEFAULT_TAX_CONFIG
    taxable_monthly = max(0.0, monthly_rental_income - monthly_expenses * config.expense_deduction_rate)
    annual_tax = progressive_tax(taxable_monthly * 12, config.income_tax_brackets)
    return round(annual_tax) if annual_estimate else round(annual_tax / 12)


def calculate_capital_gains_tax(
    purchase_price: float,
    sale_price: float,
    holding_period_months: int,
    tax_config: TaxConfig | None = None,
) -> int:
    """Tax on the sale profit; losses are untaxed."""
    config = tax_config or DEFAULT_TAX_CONFIG
    profit = max(0.0, sale_price - purchase_price)
    if holding_period_months >= config.long_term_holding_months:
        rate = config.long_term_capital_gains_rate
    else:
        rate = config.short_term_capital_gains_rate
    return round(profit * rate)
