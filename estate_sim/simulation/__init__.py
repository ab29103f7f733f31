"""Simulation clock, financial state machine and reports."""

from estate_sim.simulation.clock import Scheduler
from estate_sim.simulation.engine import (
    Simulation,
    calculate_admin_fee,
    calculate_loan_approval,
    calculate_rate_protection_cost,
)
from estate_sim.simulation.reports import (
    PortfolioReport,
    PropertyPerformance,
    TaxSummary,
    portfolio_report,
    property_performance,
    tax_summary,
)

__all__ = [
    "PortfolioReport",
    "PropertyPerformance",
    "Scheduler",
    "Simulation",
    "TaxSummary",
    "calculate_admin_fee",
    "calculate_loan_approval",
    "calculate_rate_protection_cost",
    "portfolio_report",
    "property_performance",
    "tax_summary",
]
