"""Financial state machine: daily billing, mortgage servicing and player commands."""

from __future__ import annotations

import functools
import logging
import random
import threading
from decimal import Decimal

from estate_sim.config import BankConfig, SimulationConfig
from estate_sim.events.engine import EventEngine
from estate_sim.exceptions import PropertyNotFoundError
from estate_sim.generators.patterns import calculate_tenant_event_probability
from estate_sim.generators.tenant import TenantGenerator
from estate_sim.models import (
    PLAYER,
    CapitalGainRecord,
    CommandResult,
    EventImpactType,
    EventSeverity,
    GameEvent,
    LeaseApplication,
    Location,
    Notice,
    PaymentRecord,
    Property,
    PropertyType,
    RateChange,
    RateProtection,
    TenantEvent,
    TenantEventType,
)
from estate_sim.pricing.maintenance import calculate_maintenance_cost
from estate_sim.pricing.rent import calculate_rent
from estate_sim.pricing.taxes import (
    calculate_capital_gains_tax,
    calculate_property_tax,
    calculate_rental_income_tax,
)
from estate_sim.simulation.reports import PortfolioReport, TaxSummary, portfolio_report, tax_summary
from estate_sim.store.world import WorldState
from estate_sim.utils import add_months, holding_months, months_between, to_money

logger = logging.getLogger(__name__)

BASE_APPLICATION_COUNT = 3
MANAGER_APPLICATION_COUNT = 3


def calculate_admin_fee(payment: Decimal | float, bank: BankConfig) -> Decimal:
    """Fixed fee plus a share of the payment; nothing on a zero payment."""
    if payment <= 0:
        return Decimal("0.00")
    fee = Decimal(str(bank.admin_fee_fixed)) + to_money(payment) * Decimal(str(bank.admin_fee_percent))
    return to_money(fee)


def calculate_loan_approval(
    credit_score: int,
    total_debt: Decimal | float,
    total_asset_value: float,
    max_loan_to_value_ratio: float,
) -> int:
    """Approval probability (0-100) from credit score and leverage headroom.

    Parameters
    ----------
    credit_score : int
        Bank-relationship credit score.
    total_debt : Decimal | float
        Outstanding debt before the new loan.
    total_asset_value : float
        Value of the player's properties.
    max_loan_to_value_ratio : float
        The bank's LTV limit.

    Returns
    -------
    int
        Rounded approval percentage.
    """
    credit_factor = min(100, 50 + credit_score / 20)
    if total_asset_value > 0:
        debt_ratio = float(total_debt) / total_asset_value
        debt_factor = max(0, 100 * (1 - debt_ratio / max_loan_to_value_ratio))
    else:
        debt_factor = 100
    return round(min(100, (credit_factor + debt_factor) / 2))


def calculate_rate_protection_cost(total_debt: Decimal | float, current_rate: float, cap_rate: float) -> Decimal:
    """Monthly price of capping the rate, in whole dollars; tighter caps cost more."""
    gap = cap_rate - current_rate
    if gap <= 0.01:
        share = Decimal("0.0005")
    elif gap <= 0.02:
        share = Decimal("0.0003")
    else:
        share = Decimal("0.0002")
    return to_money(round(to_money(total_debt) * share))


def synchronized(method):
    """Run ``method`` under the simulation lock."""

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        with self._lock:
            return method(self, *args, **kwargs)

    return wrapper


def command(method):
    """Run a player command under the lock and surface its message as a notice."""

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs) -> CommandResult:
        with self._lock:
            result = method(self, *args, **kwargs)
            if result.message:
                self.world.add_notice(result.message, "info" if result.success else "warning")
            return result

    return wrapper


class Simulation:
    """Owns the world state and every transition applied to it.

    The four tick phases and all player commands take the same re-entrant
    lock, so a command never observes a half-applied tick.

    Parameters
    ----------
    world : WorldState
        State to drive.
    config : SimulationConfig | None
        Tunables (defaults when omitted).
    rng : random.Random | None
        Random stream for every draw the simulation makes; seeded from
        ``config.seed`` when omitted.
    """

    def __init__(
        self,
        world: WorldState,
        config: SimulationConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.world = world
        self.config = config or SimulationConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.event_engine = EventEngine(rng=self.rng, events=world.events)
        self.tenant_generator = TenantGenerator(rng=self.rng)
        self.tick_count = 0
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Queries

    @property
    @synchronized
    def cash(self) -> Decimal:
        return self.world.cash

    @property
    @synchronized
    def current_date(self):
        return self.world.current_date

    @property
    @synchronized
    def paused(self) -> bool:
        return self.world.paused

    @property
    @synchronized
    def tick_rate_ms(self) -> int:
        return self.world.tick_rate_ms

    @property
    @synchronized
    def notices(self) -> list[Notice]:
        return list(self.world.notices)

    @synchronized
    def properties(self) -> list[Property]:
        return list(self.world.properties.values())

    @synchronized
    def events(self) -> list[GameEvent]:
        return list(self.world.events)

    @synchronized
    def active_events(self) -> list[GameEvent]:
        return self.event_engine.active_events

    @synchronized
    def report(self) -> PortfolioReport:
        return portfolio_report(self.world)

    @synchronized
    def taxes(self) -> TaxSummary:
        return tax_summary(self.world, self.config.tax)

    @synchronized
    def impact(
        self,
        impact_type: EventImpactType,
        area: Location | None = None,
        property_type: PropertyType | None = None,
    ) -> float:
        return self.event_engine.impact(impact_type, area, property_type)

    # ------------------------------------------------------------------
    # Tick phases

    @synchronized
    def tick(self) -> bool:
        """Run one tick: day advance, periodic event check, mortgage, protection.

        Returns False without touching state while paused.
        """
        if self.world.paused:
            return False
        self.tick_count += 1
        self.advance_day()
        if self.tick_count % self.config.event_check_every == 0:
            self.check_events()
        self.service_mortgage()
        self.bill_rate_protection()
        return True

    @synchronized
    def advance_day(self) -> None:
        today = self.world.advance_day()
        for prop in self.world.listed_properties():
            prop.time_on_market += 1

        if today.day == 1:
            self._process_month()

        if self.rng.random() < self.config.tenant_event_chance:
            self._process_random_tenant_event()

    @synchronized
    def check_events(self) -> list[GameEvent]:
        spawned = self.event_engine.check(self.world.current_date)
        if spawned:
            major = [e for e in spawned if e.severity == EventSeverity.MAJOR]
            if major:
                plural = "s have" if len(major) > 1 else " has"
                self.world.add_notice(f"Warning: {len(major)} major event{plural} occurred!", "warning")
            else:
                plural = "s have" if len(spawned) > 1 else " has"
                self.world.add_notice(f"{len(spawned)} new event{plural} occurred.")
        return spawned

    @synchronized
    def service_mortgage(self) -> None:
        """Collect the repayment plus admin fee, then review the rate if due."""
        loan = self.world.loan
        bank = self.config.bank

        if loan.total_debt > 0 and loan.monthly_repayment > 0:
            repayment = loan.monthly_repayment
            fee = calculate_admin_fee(repayment, bank)
            due = repayment + fee

            if self.world.cash >= due:
                self.world.cash -= due
                loan.total_debt = max(Decimal("0.00"), loan.total_debt - repayment)
                loan.payment_history.append(PaymentRecord(self.world.current_date, repayment, fee))
                loan.consecutive_payments += 1
                loan.missed_payments = 0
                if loan.consecutive_payments % 3 == 0:
                    loan.credit_score = min(bank.credit_score_ceiling, loan.credit_score + bank.streak_bonus)
                    loan.max_loan_amount = to_money(
                        min(bank.max_loan_ceiling, loan.max_loan_amount * Decimal("1.05"))
                    )
                    loan.max_loan_to_value_ratio = min(bank.max_ltv_ceiling, loan.max_loan_to_value_ratio + 0.01)
                loan.recalculate_repayment()
            else:
                loan.consecutive_payments = 0
                loan.missed_payments += 1
                loan.credit_score = max(bank.credit_score_floor, loan.credit_score - bank.missed_payment_penalty)
                if loan.missed_payments >= 3:
                    loan.max_loan_amount = to_money(
                        max(bank.max_loan_floor, loan.max_loan_amount * Decimal("0.9"))
                    )
                    loan.max_loan_to_value_ratio = max(bank.max_ltv_floor, loan.max_loan_to_value_ratio - 0.02)
                logger.info("Missed loan payment of $%.2f (missed=%d)", due, loan.missed_payments)
                self.world.add_notice("You missed a loan payment! Your credit score has decreased.", "warning")

        if self.world.current_date >= loan.next_rate_change_date:
            self.review_interest_rate()

    @synchronized
    def review_interest_rate(self) -> float:
        """Drift the base rate, apply event pressure, clamp and honor any cap."""
        loan = self.world.loan
        bank = self.config.bank

        drift = (self.rng.random() - 0.5) * 2 * bank.rate_fluctuation
        new_rate = loan.base_interest_rate + drift + self.impact(EventImpactType.INTEREST_RATE)
        new_rate = max(bank.min_rate, min(bank.max_rate, new_rate))

        protection = loan.rate_protection
        if protection.active and new_rate > protection.cap_rate:
            new_rate = protection.cap_rate

        loan.next_rate_change_date = add_months(self.world.current_date, bank.rate_review_months)
        self.apply_rate_change(new_rate)
        return new_rate

    @synchronized
    def apply_rate_change(self, new_rate: float) -> None:
        """Set the base rate, log it and recompute the repayment."""
        loan = self.world.loan
        previous = loan.base_interest_rate
        loan.base_interest_rate = new_rate
        loan.rate_history.append(RateChange(self.world.current_date, new_rate))
        loan.recalculate_repayment()
        logger.info("Interest rate changed from %.4f to %.4f", previous, new_rate)

        if loan.total_debt > 0:
            direction = "increased" if new_rate > previous else "decreased"
            self.world.add_notice(f"Interest rates have {direction} to {new_rate * 100:.1f}%!")

    @synchronized
    def bill_rate_protection(self) -> None:
        loan = self.world.loan
        protection = loan.rate_protection
        if not protection.active:
            return

        if self.world.cash >= protection.monthly_cost:
            self.world.cash -= protection.monthly_cost
        else:
            loan.rate_protection = RateProtection()
            logger.info("Rate protection cancelled for non-payment")
            self.world.add_notice("Interest rate protection cancelled due to missed payment.", "warning")

    # ------------------------------------------------------------------
    # Monthly processing

    def _process_month(self) -> None:
        today = self.world.current_date
        ledger = self.world.tax_ledger

        self._apply_market_tick()
        owned = self.world.owned_properties()

        property_tax = sum(p.property_tax for p in owned)
        maintenance = self._maintenance_due(owned) if self.config.charge_maintenance else 0
        rental_income = self._collect_rent(owned)
        income_tax = calculate_rental_income_tax(
            rental_income, ledger.last_month_property_tax, tax_config=self.config.tax
        )

        self.world.cash += rental_income - property_tax - income_tax - maintenance
        ledger.record_month(today, property_tax, income_tax, rental_income)
        self._update_leases(owned)

        if self.world.manager_hired:
            self.world.cash -= to_money(self.config.manager_fee)
            self._manager_fill_vacancies(owned)

        logger.info(
            "Month closed %s: income=%d property_tax=%d income_tax=%d maintenance=%d",
            today.isoformat(),
            rental_income,
            property_tax,
            income_tax,
            maintenance,
            extra={"sim_date": today},
        )

    def _apply_market_tick(self) -> None:
        """Appreciate every property and refresh its tax and upkeep."""
        limit = self.config.max_monthly_value_change
        today = self.world.current_date

        for prop in self.world.properties.values():
            change = prop.market_trends.historical_appreciation / 1200
            change += self.impact(EventImpactType.PROPERTY_VALUE, prop.location, prop.property_type)
            change = max(-limit, min(limit, change))

            prop.value = max(0, round(prop.value * (1 + change)))
            if not prop.is_owned:
                prop.market_price = max(0, round(prop.market_price * (1 + change)))
                prop.is_new = (today - prop.listed_date).days < 30

            tax_impact = self.impact(EventImpactType.PROPERTY_TAX, prop.location, prop.property_type)
            prop.property_tax = calculate_property_tax(prop, self.config.tax, tax_impact)
            prop.maintenance_costs = calculate_maintenance_cost(prop.location, prop.size, prop.value)

    def _maintenance_due(self, owned: list[Property]) -> int:
        total = 0
        for prop in owned:
            impact = self.impact(EventImpactType.MAINTENANCE_COST, prop.location, prop.property_type)
            total += round(prop.maintenance_costs * max(0.0, 1 + impact))
        return total

    def _collect_rent(self, owned: list[Property]) -> int:
        today = self.world.current_date
        income = 0
        for prop in owned:
            tenant = prop.current_tenant
            if tenant is None:
                continue

            quality = self.impact(EventImpactType.TENANT_QUALITY, prop.location, prop.property_type)
            pay_chance = calculate_tenant_event_probability(tenant, TenantEventType.RENT_PAID) + quality

            if self.rng.random() < pay_chance:
                income += prop.rent_price
                tenant.is_paying = True
                prop.tenant_events.append(
                    TenantEvent(TenantEventType.RENT_PAID, today, "Rent paid on time", prop.rent_price)
                )
            else:
                tenant.is_paying = False
                prop.tenant_events.append(
                    TenantEvent(TenantEventType.RENT_MISSED, today, "Rent payment missed", -prop.rent_price)
                )
                self.world.add_notice(f"{tenant.name} missed rent at {prop.address}.", "warning")
        return income

    def _update_leases(self, owned: list[Property]) -> None:
        """Give notice when a tenant's planned stay is ending; move out when it has."""
        today = self.world.current_date
        for prop in owned:
            tenant = prop.current_tenant
            if tenant is None or prop.lease_start is None:
                continue

            elapsed = months_between(prop.lease_start, today)
            if tenant.has_notified_departure and elapsed >= tenant.planned_stay_duration:
                self._vacate(prop)
                self.world.add_notice(f"{tenant.name} moved out of {prop.address}.")
            elif not tenant.has_notified_departure and elapsed >= tenant.planned_stay_duration - 1:
                tenant.has_notified_departure = True
                self.world.add_notice(f"{tenant.name} has given notice at {prop.address}.")
            elif elapsed == prop.lease_length and tenant.planned_stay_duration > elapsed:
                prop.tenant_events.append(
                    TenantEvent(TenantEventType.RENEWAL, today, "Lease renewed", 0)
                )

    def _manager_fill_vacancies(self, owned: list[Property]) -> None:
        """The manager finds the best applicant for some vacant properties each month."""
        for prop in owned:
            if prop.is_rented or prop.property_type == PropertyType.LAND:
                continue
            if self.rng.random() >= self.config.manager_efficiency:
                continue
            applications = self._generate_applications(prop, MANAGER_APPLICATION_COUNT)
            if not applications:
                continue
            best = max(applications, key=lambda a: a.tenant.credit_score)
            self._place_tenant(prop, best)
            self.world.add_notice(f"Your property manager placed {best.tenant.name} at {prop.address}.")

    def _process_random_tenant_event(self) -> None:
        rented = self.world.rented_properties()
        if not rented:
            return

        prop = self.rng.choice(rented)
        tenant = prop.current_tenant
        today = self.world.current_date

        if self.rng.random() < self.config.damage_share:
            if self.rng.random() >= calculate_tenant_event_probability(tenant, TenantEventType.DAMAGE):
                return
            cost = round(prop.value * (0.001 + self.rng.random() * 0.005))
            covered = self.world.is_outsourced(prop.property_id) or self.world.manager_hired
            prop.tenant_events.append(
                TenantEvent(
                    TenantEventType.DAMAGE,
                    today,
                    f"Repairs needed: ${cost:,}",
                    0 if covered else -cost,
                    property_impact=cost,
                )
            )
            if not covered:
                self.world.cash -= cost
                self.world.add_notice(f"Repairs needed at {prop.address}. Cost: ${cost:,}", "warning")
        else:
            if self.rng.random() >= calculate_tenant_event_probability(tenant, TenantEventType.COMPLAINT):
                return
            prop.tenant_events.append(
                TenantEvent(TenantEventType.COMPLAINT, today, f"{tenant.name} filed a complaint", 0)
            )

    # ------------------------------------------------------------------
    # Helpers

    def _find_property(self, property_id: int) -> Property | None:
        try:
            return self.world.get_property(property_id)
        except PropertyNotFoundError:
            logger.warning("Property %s not found", property_id)
            return None

    def _generate_applications(self, prop: Property, base_count: int) -> list[LeaseApplication]:
        tenant_quality = self.impact(EventImpactType.TENANT_QUALITY, prop.location, prop.property_type)
        area_quality = self.impact(EventImpactType.AREA_QUALITY, prop.location, prop.property_type)
        count = max(1, round(base_count * (1 + tenant_quality)))
        return self.tenant_generator.generate_lease_applications(
            prop.rent_price,
            count,
            tenant_quality + area_quality,
            application_date=self.world.current_date,
            application_fee=self.config.application_fee,
        )

    def _place_tenant(self, prop: Property, application: LeaseApplication) -> None:
        today = self.world.current_date
        tenant = application.tenant
        tenant.lease_start = today
        prop.current_tenant = tenant
        prop.lease_start = today
        prop.lease_length = application.desired_lease_length
        prop.lease_applications = []

    @staticmethod
    def _vacate(prop: Property) -> None:
        if prop.current_tenant is not None:
            prop.tenant_history.append(prop.current_tenant)
        prop.current_tenant = None
        prop.lease_start = None
        prop.lease_length = None

    # ------------------------------------------------------------------
    # Player commands

    @command
    def buy_or_sell(self, property_id: int) -> CommandResult:
        """Sell a player-owned property, otherwise buy it."""
        prop = self._find_property(property_id)
        if prop is None:
            return CommandResult.noop()
        if prop.is_owned:
            return self._sell(prop)
        return self._buy(prop)

    def _buy(self, prop: Property) -> CommandResult:
        price = prop.market_price
        if self.world.cash < price:
            return CommandResult.rejected("You don't have enough money to buy this property.")

        self.world.cash -= price
        prop.owner = PLAYER
        prop.purchase_date = self.world.current_date
        prop.is_new = False
        logger.info("Bought property %d for $%d", prop.property_id, price)
        return CommandResult.ok(f"Purchased {prop.address} for ${price:,}", -price)

    def _sell(self, prop: Property) -> CommandResult:
        today = self.world.current_date
        sale_price = prop.value
        months = holding_months(prop.purchase_date or today, today)
        tax = calculate_capital_gains_tax(prop.market_price, sale_price, months, self.config.tax)
        proceeds = sale_price - tax

        self.world.capital_gains.append(
            CapitalGainRecord(
                property_id=prop.property_id,
                sale_date=today,
                purchase_price=prop.market_price,
                sale_price=sale_price,
                holding_period_months=months,
                tax=tax,
            )
        )
        self.world.tax_ledger.record_capital_gains(today, tax)

        self._vacate(prop)
        prop.lease_applications = []
        prop.owner = None
        prop.purchase_date = None
        prop.listed_date = today
        prop.time_on_market = 0
        self.world.outsourced.discard(prop.property_id)
        self.world.cash += proceeds

        logger.info("Sold property %d for $%d (tax $%d)", prop.property_id, sale_price, tax)
        return CommandResult.ok(f"Sold {prop.address} for ${sale_price:,}", proceeds)

    @command
    def take_loan(self, amount: Decimal | float) -> CommandResult:
        """Borrow ``amount`` subject to hard limits and a random approval roll."""
        loan = self.world.loan
        amount = to_money(amount)
        if amount <= 0:
            return CommandResult.rejected("Loan amount must be greater than zero.")

        # Event pressure can only tighten the hard limit
        tightening = min(0.0, self.impact(EventImpactType.MAX_LOAN_AMOUNT))
        max_loan = to_money(loan.max_loan_amount * Decimal(str(1 + tightening)))
        if amount > max_loan:
            return CommandResult.rejected(
                f"You cannot take a loan greater than your maximum loan amount of ${max_loan:,.0f}."
            )

        assets = self.world.total_asset_value()
        debt_ratio = float(loan.total_debt + amount) / assets if assets > 0 else 1
        if debt_ratio > loan.max_loan_to_value_ratio:
            return CommandResult.rejected(
                f"This loan would exceed your maximum allowed debt ratio of "
                f"{loan.max_loan_to_value_ratio * 100:.1f}%."
            )

        approval = calculate_loan_approval(
            loan.credit_score, loan.total_debt, assets, loan.max_loan_to_value_ratio
        )
        approval += self.impact(EventImpactType.LOAN_APPROVAL) * 100
        if self.rng.random() * 100 > approval:
            return CommandResult.rejected(
                "Loan application denied. Improve your credit score or reduce debt ratio."
            )

        self.world.cash += amount
        loan.total_debt += amount
        loan.recalculate_repayment()
        logger.info("Loan of $%.2f approved (approval %.0f%%)", amount, approval)
        return CommandResult.ok(f"You took a loan of ${amount:,.0f}.", amount)

    @command
    def repay_loan(self, amount: Decimal | float) -> CommandResult:
        """Repay part of the debt early, paying the early-repayment fee."""
        loan = self.world.loan
        amount = to_money(amount)
        if amount <= 0:
            return CommandResult.rejected("Repayment amount must be greater than zero.")
        if amount > loan.total_debt:
            return CommandResult.rejected("You cannot repay more than your outstanding debt.")

        fee = to_money(round(amount * Decimal(str(self.config.bank.early_repayment_fee))))
        total = amount + fee
        if self.world.cash < total:
            return CommandResult.rejected(f"You need ${total:,.0f} to repay this loan with fees.")

        self.world.cash -= total
        loan.total_debt = max(Decimal("0.00"), loan.total_debt - amount)
        loan.recalculate_repayment()
        loan.payment_history.append(PaymentRecord(self.world.current_date, amount, fee))
        return CommandResult.ok(f"Repaid ${amount:,.0f} of your loan.", -total)

    @command
    def renovate(self, property_id: int) -> CommandResult:
        prop = self._find_property(property_id)
        if prop is None:
            return CommandResult.noop()
        if not prop.is_owned:
            return CommandResult.rejected("You can only renovate properties you own.")

        base_cost = round(prop.value * self.config.renovation_cost_rate)
        impact = self.impact(EventImpactType.RENOVATION_COST, prop.location, prop.property_type)
        cost = round(base_cost * (1 + impact))
        if self.world.cash < cost:
            return CommandResult.rejected(f"You need ${cost:,} to renovate this property.")

        self.world.cash -= cost
        prop.value = round(prop.value * (1 + self.config.renovation_value_gain))
        prop.renovation_bonus_percentage = min(
            100, prop.renovation_bonus_percentage + self.config.renovation_bonus_step
        )
        prop.rent_price = calculate_rent(prop.location, prop.size, prop.renovation_bonus_percentage / 100)
        return CommandResult.ok(f"Renovated {prop.address} for ${cost:,}", -cost)

    @command
    def find_tenants(self, property_id: int) -> CommandResult:
        """Collect lease applications for a vacant owned property."""
        prop = self._find_property(property_id)
        if prop is None:
            return CommandResult.noop()
        if prop.property_type == PropertyType.LAND:
            return CommandResult.rejected(
                "Land properties cannot be rented. Consider developing it in the future."
            )
        if not prop.is_owned:
            return CommandResult.rejected("You can only rent out properties you own.")
        if prop.is_rented:
            return CommandResult.rejected("This property already has a tenant.")

        base_count = BASE_APPLICATION_COUNT + self.rng.randint(0, 2)
        applications = self._generate_applications(prop, base_count)
        if not applications:
            return CommandResult.rejected(f"No tenants applied for {prop.address}.")

        prop.lease_applications = applications
        return CommandResult.ok(f"{len(applications)} lease applications received for {prop.address}.")

    @command
    def end_lease(self, property_id: int) -> CommandResult:
        prop = self._find_property(property_id)
        if prop is None:
            return CommandResult.noop()
        if not prop.is_rented:
            return CommandResult.rejected("This property doesn't have a tenant.")

        self._vacate(prop)
        return CommandResult.ok(f"Ended the lease at {prop.address}.")

    @synchronized
    def rent(self, property_id: int) -> CommandResult:
        """End the lease of a rented property, otherwise look for tenants."""
        prop = self._find_property(property_id)
        if prop is None:
            return CommandResult.noop()
        if prop.is_rented:
            return self.end_lease(property_id)
        return self.find_tenants(property_id)

    @command
    def accept_application(self, property_id: int, application: LeaseApplication | int) -> CommandResult:
        """Promote a pending application's tenant to current tenant.

        ``application`` is a pending application or its index in the
        property's application list.
        """
        prop = self._find_property(property_id)
        if prop is None:
            return CommandResult.noop()
        if prop.is_rented:
            return CommandResult.rejected("This property already has a tenant.")

        if isinstance(application, int):
            if not 0 <= application < len(prop.lease_applications):
                return CommandResult.rejected("Application not found.")
            application = prop.lease_applications[application]
        elif not any(a is application for a in prop.lease_applications):
            return CommandResult.rejected("Application not found.")

        self._place_tenant(prop, application)
        fee = Decimal("0.00")
        if not self.world.is_outsourced(prop.property_id):
            fee = to_money(application.application_fee)
            self.world.cash += fee
        return CommandResult.ok(f"Accepted tenant {application.tenant.name} for {prop.address}", fee)

    @command
    def evict_tenant(self, property_id: int) -> CommandResult:
        prop = self._find_property(property_id)
        if prop is None:
            return CommandResult.noop()
        if not prop.is_rented:
            return CommandResult.rejected("This property doesn't have a tenant to evict.")

        cost = to_money(self.config.eviction_cost)
        if self.world.cash < cost:
            return CommandResult.rejected(f"You need ${cost:,.0f} to cover legal fees for eviction.")

        self.world.cash -= cost
        prop.current_tenant.rental_history.evictions += 1
        prop.tenant_events.append(
            TenantEvent(TenantEventType.LEASE_BREAK, self.world.current_date, "Tenant was evicted", 0)
        )
        self._vacate(prop)
        return CommandResult.ok(f"Evicted tenant from {prop.address}", -cost)

    @command
    def toggle_outsource(self, property_id: int) -> CommandResult:
        prop = self._find_property(property_id)
        if prop is None:
            return CommandResult.noop()

        if prop.property_id in self.world.outsourced:
            self.world.outsourced.discard(prop.property_id)
            return CommandResult.ok(f"{prop.address} is no longer outsourced.")
        self.world.outsourced.add(prop.property_id)
        return CommandResult.ok(f"{prop.address} is now outsourced.")

    @command
    def toggle_manager(self) -> CommandResult:
        self.world.manager_hired = not self.world.manager_hired
        if self.world.manager_hired:
            return CommandResult.ok(
                "Property manager hired! They'll handle tenant issues and find new renters."
            )
        return CommandResult.ok("Property manager has been dismissed.")

    @command
    def select_event_choice(self, event_id: str, choice_id: str) -> CommandResult:
        result = self.event_engine.select_choice(event_id, choice_id, self.world.cash)
        if result.success:
            self.world.cash += result.money_change
        return result

    @command
    def purchase_rate_protection(self, cap_rate: float) -> CommandResult:
        """Cap future rate reviews at ``cap_rate``; the first payment is due now."""
        if cap_rate <= 0:
            return CommandResult.rejected("Cap rate must be greater than zero.")

        loan = self.world.loan
        cost = calculate_rate_protection_cost(loan.total_debt, loan.base_interest_rate, cap_rate)
        if self.world.cash < cost:
            return CommandResult.rejected("You don't have enough money for the first payment")

        loan.rate_protection = RateProtection(active=True, cap_rate=cap_rate, monthly_cost=cost)
        self.world.cash -= cost
        return CommandResult.ok(
            f"Interest rate protection purchased! Your rate will not exceed {cap_rate * 100:.2f}%",
            -cost,
        )

    @command
    def cancel_rate_protection(self) -> CommandResult:
        self.world.loan.rate_protection = RateProtection()
        return CommandResult.ok("Interest rate protection plan canceled.")

    @command
    def set_tick_rate(self, tick_rate_ms: int) -> CommandResult:
        if tick_rate_ms <= 0:
            return CommandResult.rejected("Tick rate must be positive.")
        self.world.tick_rate_ms = int(tick_rate_ms)
        return CommandResult.ok(f"Tick rate set to {tick_rate_ms} ms.")

    @command
    def set_paused(self, paused: bool) -> CommandResult:
        self.world.paused = paused
        return CommandResult.ok("Simulation paused." if paused else "Simulation resumed.")
