"""Background scheduler that drives simulation ticks."""

from __future__ import annotations

import logging
import threading

from estate_sim.simulation.engine import Simulation

logger = logging.getLogger(__name__)


class Scheduler:
    """Run ``Simulation.tick`` on one background thread at the simulation's tick rate.

    Each tick body runs to completion under the simulation lock; pausing is
    observed at the next tick boundary. The interval is re-read every loop
    so ``set_tick_rate`` takes effect on the following tick.
    """

    def __init__(self, simulation: Simulation) -> None:
        self.simulation = simulation
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="estate-sim-clock", daemon=True)
        self._thread.start()
        logger.info("Scheduler started at %d ms per tick", self.simulation.tick_rate_ms)

    def stop(self, timeout: float | None = None) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
        logger.info("Scheduler stopped after %d ticks", self.simulation.tick_count)

    def step(self, ticks: int = 1) -> int:
        """Run ``ticks`` ticks synchronously; return how many were not skipped."""
        return sum(1 for _ in range(ticks) if self.simulation.tick())

    def _run(self) -> None:
        while not self._stop.wait(self.simulation.tick_rate_ms / 1000):
            self.simulation.tick()

    def __enter__(self) -> Scheduler:
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()
