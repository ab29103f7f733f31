"""Portfolio and tax report aggregates."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field

from estate_sim.config import TaxConfig
from estate_sim.models import Property
from estate_sim.pricing.taxes import calculate_rental_income_tax
from estate_sim.store.world import WorldState


@dataclass
class PropertyPerformance:
    """One row of the per-property performance table."""

    property_id: int
    address: str
    purchase_price: int
    current_value: int
    roi: float  # percentage
    monthly_income: int
    monthly_cash_flow: int
    cap_rate: float  # percentage


@dataclass
class PortfolioReport:
    """Headline metrics for the player's portfolio."""

    portfolio_value: float
    monthly_rental_income: float
    monthly_expenses: float
    monthly_cash_flow: float
    net_worth: float
    cap_rate: float
    cash_on_cash: float
    average_roi: float
    occupancy_rate: float
    dscr: float
    type_distribution: dict[str, float] = field(default_factory=dict)
    location_distribution: dict[str, float] = field(default_factory=dict)
    properties: list[PropertyPerformance] = field(default_factory=list)


@dataclass
class TaxSummary:
    """Taxes paid and estimated for the current year."""

    monthly_property_tax: float
    last_month_property_tax: float
    last_month_income_tax: float
    ytd_property_tax: float
    ytd_income_tax: float
    ytd_capital_gains_tax: float
    ytd_total: float
    estimated_annual_income_tax: int
    recent_capital_gains: list = field(default_factory=list)


def property_performance(prop: Property) -> PropertyPerformance:
    monthly_income = prop.rent_price if prop.is_rented else 0
    roi = (prop.value - prop.market_price) / prop.market_price * 100 if prop.market_price else 0.0
    cap_rate = monthly_income * 12 / prop.value * 100 if prop.is_rented and prop.value else 0.0
    return PropertyPerformance(
        property_id=prop.property_id,
        address=prop.address,
        purchase_price=prop.market_price,
        current_value=prop.value,
        roi=roi,
        monthly_income=monthly_income,
        monthly_cash_flow=monthly_income - prop.maintenance_costs,
        cap_rate=cap_rate,
    )


def _share_by(owned: list[Property], key) -> dict[str, float]:
    totals: dict[str, float] = defaultdict(float)
    for prop in owned:
        totals[key(prop).value] += prop.value
    return dict(totals)


def portfolio_report(world: WorldState) -> PortfolioReport:
    """Compute portfolio metrics from the current world state.

    Parameters
    ----------
    world : WorldState
        World to report on.

    Returns
    -------
    PortfolioReport
        Metrics; ratios are 0 when their denominator is.
    """
    owned = world.owned_properties()
    # Report metrics are floats
    repayment = float(world.loan.monthly_repayment)
    debt = float(world.loan.total_debt)

    portfolio_value = sum(p.value for p in owned)
    rental_income = sum(p.rent_price for p in owned if p.is_rented)
    expenses = sum(p.maintenance_costs for p in owned)
    cash_flow = rental_income - expenses - repayment
    equity = portfolio_value - debt

    return PortfolioReport(
        portfolio_value=portfolio_value,
        monthly_rental_income=rental_income,
        monthly_expenses=expenses,
        monthly_cash_flow=cash_flow,
        net_worth=portfolio_value + float(world.cash) - debt,
        cap_rate=rental_income * 12 / portfolio_value * 100 if portfolio_value > 0 else 0.0,
        cash_on_cash=cash_flow * 12 / equity * 100 if portfolio_value > 0 and equity else 0.0,
        average_roi=(
            sum((p.value - p.market_price) / p.market_price for p in owned if p.market_price) / len(owned) * 100
            if owned
            else 0.0
        ),
        occupancy_rate=sum(1 for p in owned if p.is_rented) / len(owned) * 100 if owned else 0.0,
        dscr=rental_income / repayment if repayment > 0 else 0.0,
        type_distribution=_share_by(owned, lambda p: p.property_type),
        location_distribution=_share_by(owned, lambda p: p.location),
        properties=[property_performance(p) for p in owned],
    )


def tax_summary(world: WorldState, tax_config: TaxConfig | None = None) -> TaxSummary:
    """Summarize the tax ledger with an annual income tax estimate."""
    ledger = world.tax_ledger
    owned = world.owned_properties()
    rental_income = sum(p.rent_price for p in owned if p.is_rented)
    monthly_property_tax = sum(p.property_tax for p in owned)
    return TaxSummary(
        monthly_property_tax=monthly_property_tax,
        last_month_property_tax=ledger.last_month_property_tax,
        last_month_income_tax=ledger.last_month_income_tax,
        ytd_property_tax=ledger.ytd_property_tax,
        ytd_income_tax=ledger.ytd_income_tax,
        ytd_capital_gains_tax=ledger.ytd_capital_gains_tax,
        ytd_total=ledger.ytd_total,
        estimated_annual_income_tax=calculate_rental_income_tax(
            rental_income, monthly_property_tax, annual_estimate=True, tax_config=tax_config
        ),
        recent_capital_gains=list(world.capital_gains),
    )
