"""Configuration management for estate-sim."""

from dataclasses import dataclass, field
from enum import IntEnum

from estate_sim.exceptions import ConfigurationError
from estate_sim.models.enums import Location


class TickSpeed(IntEnum):
    """Preset tick intervals in milliseconds."""

    SLOW = 1000
    NORMAL = 500
    FAST = 100


@dataclass
class BankConfig:
    """Lending terms and bank-relationship limits."""

    initial_credit_score: int = 600
    initial_max_loan: float = 1_000_000
    initial_max_ltv: float = 0.7
    initial_interest_rate: float = 0.05
    admin_fee_fixed: float = 25.0
    admin_fee_percent: float = 0.005
    early_repayment_fee: float = 0.02
    min_rate: float = 0.02
    max_rate: float = 0.12
    rate_fluctuation: float = 0.005
    rate_review_months: int = 3
    credit_score_floor: int = 300
    credit_score_ceiling: int = 850
    streak_bonus: int = 5
    missed_payment_penalty: int = 15
    max_loan_ceiling: float = 5_000_000
    max_ltv_ceiling: float = 0.9
    max_ltv_floor: float = 0.5

    @property
    def max_loan_floor(self) -> float:
        """Max loan never shrinks below half the initial limit."""
        return self.initial_max_loan / 2


@dataclass
class TaxConfig:
    """Tax schedule constants."""

    property_tax_rates: dict[Location, float] = field(
        default_factory=lambda: {
            Location.DOWNTOWN: 0.018,
            Location.URBAN: 0.016,
            Location.SUBURBAN: 0.014,
            Location.COUNTRY: 0.010,
        }
    )
    # (threshold, rate) pairs, ascending
    income_tax_brackets: list[tuple[float, float]] = field(
        default_factory=lambda: [
            (0, 0.10),
            (50_000, 0.15),
            (100_000, 0.25),
            (250_000, 0.35),
        ]
    )
    expense_deduction_rate: float = 0.8
    short_term_capital_gains_rate: float = 0.25
    long_term_capital_gains_rate: float = 0.15
    long_term_holding_months: int = 12


@dataclass
class SimulationConfig:
    """Main configuration for a simulation run."""

    seed: int | None = None
    num_properties: int = 20
    starting_cash: float = 250_000
    tick_rate_ms: int = 5000
    event_check_every: int = 10  # ticks between event checks
    tenant_event_chance: float = 0.1
    damage_share: float = 0.7  # share of random tenant events that are DAMAGE
    manager_fee: float = 500
    manager_efficiency: float = 0.85
    eviction_cost: float = 1000
    application_fee: float = 50
    renovation_cost_rate: float = 0.05
    renovation_value_gain: float = 0.10
    renovation_bonus_step: int = 20
    charge_maintenance: bool = True
    max_monthly_value_change: float = 0.10
    notice_log_size: int = 50
    capital_gains_log_size: int = 10
    log_level: str = "INFO"
    bank: BankConfig = field(default_factory=BankConfig)
    tax: TaxConfig = field(default_factory=TaxConfig)

    def __post_init__(self) -> None:
        if self.tick_rate_ms <= 0:
            raise ConfigurationError(f"tick_rate_ms must be positive, got {self.tick_rate_ms}")
        if self.num_properties < 0:
            raise ConfigurationError(f"num_properties must be >= 0, got {self.num_properties}")
        if self.event_check_every < 1:
            raise ConfigurationError("event_check_every must be at least 1")

    @classmethod
    def from_env(cls) -> "SimulationConfig":
        """Create config from environment variables."""
        import os

        def _read(name: str, default: str, cast):
            raw = os.getenv(name, default)
            try:
                return cast(raw)
            except ValueError as exc:
                raise ConfigurationError(f"Invalid value for {name}: {raw!r}") from exc

        seed_raw = os.getenv("ESTATE_SIM_SEED")
        return cls(
            seed=_read("ESTATE_SIM_SEED", seed_raw, int) if seed_raw else None,
            num_properties=_read("ESTATE_SIM_NUM_PROPERTIES", "20", int),
            starting_cash=_read("ESTATE_SIM_STARTING_CASH", "250000", float),
            tick_rate_ms=_read("ESTATE_SIM_TICK_MS", "5000", int),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
