#!/usr/bin/env python3
"""Run a headless simulation and print its progress.

Seeds a new game, buys the cheapest listings the player can afford, finds
tenants for them, then advances simulated days and prints a summary at the
end of every month and a portfolio report at the end.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from estate_sim.config import SimulationConfig
from estate_sim.logging import setup_logging
from estate_sim.scenarios import NewGameScenario
from estate_sim.simulation import Scheduler, Simulation
from estate_sim.sinks import ConsoleSink

logger = logging.getLogger(__name__)


def buy_starter_portfolio(simulation: Simulation, count: int) -> int:
    """Buy up to ``count`` of the cheapest listings and look for tenants."""
    bought = 0
    listings = sorted(simulation.world.listed_properties(), key=lambda p: p.market_price)
    for prop in listings:
        if bought >= count:
            break
        result = simulation.buy_or_sell(prop.property_id)
        if not result.success:
            continue
        bought += 1
        if simulation.find_tenants(prop.property_id).success:
            simulation.accept_application(prop.property_id, 0)
    return bought


def main() -> None:
    parser = argparse.ArgumentParser(description="Run a headless estate simulation")
    parser.add_argument("--days", type=int, default=365, help="Simulated days to run")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--buy", type=int, default=2, help="Number of properties to buy up front")
    parser.add_argument("--properties", type=int, default=None, help="Size of the listing market")
    parser.add_argument("--log-level", default=None, help="Log level (default from LOG_LEVEL)")
    parser.add_argument("--log-format", choices=["standard", "json"], default="standard")
    parser.add_argument("--show-properties", action="store_true", help="Print owned properties at the end")
    args = parser.parse_args()

    config = SimulationConfig.from_env()
    if args.seed is not None:
        config.seed = args.seed
    if args.properties is not None:
        config.num_properties = args.properties
    simulation: Simulation | None = None
    setup_logging(
        level=args.log_level or config.log_level,
        format_type=args.log_format,
        sim_clock=lambda: simulation.world.current_date if simulation is not None else None,
    )

    simulation = NewGameScenario(seed=config.seed, config=config).simulation()
    bought = buy_starter_portfolio(simulation, args.buy)
    logger.info("Bought %d starter properties", bought)

    sink = ConsoleSink(pretty=True)
    scheduler = Scheduler(simulation)
    for _ in range(args.days):
        scheduler.step()
        if simulation.current_date.day == 1:
            sink.write_summary(simulation.world)

    report = simulation.report()
    print(
        f"\nNet worth ${report.net_worth:,.0f} | cash flow ${report.monthly_cash_flow:,.0f}/mo"
        f" | occupancy {report.occupancy_rate:.1f}% | cap rate {report.cap_rate:.2f}%"
    )
    if args.show_properties:
        sink.write_batch("owned_properties", simulation.world.owned_properties())
    sink.write_batch("events", simulation.events())
    sink.close()


if __name__ == "__main__":
    main()
