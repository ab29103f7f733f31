"""New-game scenario: a fresh market and a debt-free player."""

from __future__ import annotations

import logging
import random
from collections import Counter
from datetime import date

from estate_sim.config import SimulationConfig
from estate_sim.generators.property import PropertyGenerator
from estate_sim.simulation.engine import Simulation
from estate_sim.store.world import WorldState

logger = logging.getLogger(__name__)


class NewGameScenario:
    """Seed a world with a generated listing market.

    This scenario creates:
    - ``num_properties`` listed properties, generated in order so each one's
      market statistics reflect the listings before it
    - a player with the configured starting cash and no debt
    - a bank relationship at the configured initial terms
    """

    def __init__(
        self,
        seed: int | None = None,
        start_date: date | None = None,
        *,
        config: SimulationConfig | None = None,
    ) -> None:
        """Initialize the scenario.

        Parameters
        ----------
        seed : int | None
            Random seed for reproducibility. Overrides ``config.seed``.
        start_date : date | None
            First simulated day (today when omitted).
        config : SimulationConfig | None
            Simulation configuration (defaults when omitted).
        """
        self.config = config or SimulationConfig()
        self.seed = seed if seed is not None else self.config.seed
        self.start_date = start_date or date.today()
        self.rng = random.Random(self.seed)
        self._property_gen = PropertyGenerator(seed=self.seed, rng=self.rng)

    def generate(self) -> WorldState:
        """Generate the starting world.

        Returns
        -------
        WorldState
            World holding the generated market.
        """
        logger.info(
            "Starting new game: %d properties, $%s starting cash",
            self.config.num_properties,
            f"{self.config.starting_cash:,.0f}",
        )
        world = WorldState.new(self.config, self.start_date)
        for prop in self._property_gen.generate_batch(self.config.num_properties, self.start_date):
            world.add_property(prop)

        by_location = Counter(p.location.value for p in world.properties.values())
        logger.info("Generated %d properties %s", len(world.properties), dict(by_location))
        return world

    def simulation(self) -> Simulation:
        """Generate the world and wrap it in a simulation sharing this scenario's stream."""
        return Simulation(self.generate(), self.config, rng=self.rng)
