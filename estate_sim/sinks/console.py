"""Console sink for watching a simulation run."""

import json
from typing import Any

from estate_sim.sinks.serialization import to_dict
from estate_sim.store.world import WorldState


class ConsoleSink:
    """Output world summaries and records to stdout."""

    def __init__(self, pretty: bool = True, max_records: int | None = None) -> None:
        """Initialize console sink.

        Parameters
        ----------
        pretty : bool
            Pretty-print JSON output.
        max_records : int | None
            Maximum records to print per batch (None for all).
        """
        self.pretty = pretty
        self.max_records = max_records
        self._counts: dict[str, int] = {}

    def write_batch(self, entity_type: str, records: list[Any]) -> None:
        """Write a batch of records to console."""
        print(f"\n{'='*60}")
        print(f"{entity_type} ({len(records)} records)")
        print("=" * 60)

        display_records = records[: self.max_records] if self.max_records else records
        for record in display_records:
            self._print(to_dict(record))

        if self.max_records and len(records) > self.max_records:
            print(f"... and {len(records) - self.max_records} more records")

        self._counts[entity_type] = self._counts.get(entity_type, 0) + len(records)

    def write_summary(self, world: WorldState) -> None:
        """Print one line per world summary field."""
        summary = world.summary()
        print(" | ".join(f"{key}={value}" for key, value in summary.items()))
        self._counts["summaries"] = self._counts.get("summaries", 0) + 1

    def close(self) -> None:
        """Print summary and close."""
        print(f"\n{'='*60}")
        print("Console Sink Summary")
        print("=" * 60)
        for entity_type, count in self._counts.items():
            print(f"  {entity_type}: {count}")

    def _print(self, data: dict) -> None:
        if self.pretty:
            print(json.dumps(data, indent=2, ensure_ascii=False, default=str))
        else:
            print(json.dumps(data, ensure_ascii=False, default=str))
