"""Tax ledger and sale records."""

from dataclasses import dataclass
from datetime import date


@dataclass
class CapitalGainRecord:
    """Profit and tax recorded when a property is sold."""

    property_id: int
    sale_date: date
    purchase_price: float
    sale_price: float
    holding_period_months: int
    tax: float

    @property
    def profit(self) -> float:
        return self.sale_price - self.purchase_price


@dataclass
class TaxLedger:
    """Monthly and year-to-date tax totals."""

    last_month_property_tax: float = 0.0
    last_month_income_tax: float = 0.0
    last_month_rental_income: float = 0.0
    year: int | None = None
    ytd_property_tax: float = 0.0
    ytd_income_tax: float = 0.0
    ytd_capital_gains_tax: float = 0.0

    @property
    def ytd_total(self) -> float:
        return self.ytd_property_tax + self.ytd_income_tax + self.ytd_capital_gains_tax

    def roll_year(self, year: int) -> None:
        """Reset year-to-date totals when the calendar year changes."""
        if self.year != year:
            self.year = year
            self.ytd_property_tax = 0.0
            self.ytd_income_tax = 0.0
            self.ytd_capital_gains_tax = 0.0

    def record_month(self, day: date, property_tax: float, income_tax: float, rental_income: float) -> None:
        self.roll_year(day.year)
        self.last_month_property_tax = property_tax
        self.last_month_income_tax = income_tax
        self.last_month_rental_income = rental_income
        self.ytd_property_tax += property_tax
        self.ytd_income_tax += income_tax

    def record_capital_gains(self, day: date, tax: float) -> None:
        self.roll_year(day.year)
        self.ytd_capital_gains_tax += tax
