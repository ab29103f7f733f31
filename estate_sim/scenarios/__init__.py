"""Scenarios for seeding simulation worlds."""

from estate_sim.scenarios.new_game import NewGameScenario

__all__ = ["NewGameScenario"]
