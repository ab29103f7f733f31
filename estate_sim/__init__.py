"""Real-estate investment simulation engine."""

from estate_sim.config import SimulationConfig
from estate_sim.scenarios import NewGameScenario
from estate_sim.simulation import Scheduler, Simulation
from estate_sim.store import WorldState

__version__ = "0.1.0"

__all__ = ["NewGameScenario", "Scheduler", "Simulation", "SimulationConfig", "WorldState"]
