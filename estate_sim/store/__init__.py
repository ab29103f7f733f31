"""World state store."""

from estate_sim.store.world import WorldState, initial_loan_state

__all__ = ["WorldState", "initial_loan_state"]
