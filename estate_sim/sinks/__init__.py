"""Output sinks for exporting simulation state."""

from estate_sim.sinks.console import ConsoleSink
from estate_sim.sinks.serialization import serialize_value, snapshot, to_dict

__all__ = ["ConsoleSink", "serialize_value", "snapshot", "to_dict"]
