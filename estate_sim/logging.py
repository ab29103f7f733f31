"""Structured logging configuration for estate-sim.

Every record is stamped with the simulated date as well as the wall-clock
time, so a long run can be read against the game calendar.
"""

import json
import logging
import sys
from collections.abc import Callable
from datetime import date, datetime, timezone
from typing import Any

NO_SIM_DATE = "-"


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    sim_clock: Callable[[], date | None] | None = None,
) -> None:
    """Configure logging for estate-sim.

    Parameters
    ----------
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    format_type : str
        Format type: "standard" or "json".
    sim_clock : Callable[[], date | None] | None
        Returns the current simulated date; records show "-" while it
        returns None or when no clock is given.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(sim_date)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(SimDateFilter(sim_clock))
    root_logger.addHandler(console_handler)

    logging.getLogger("estate_sim").setLevel(log_level)

    # Faker logs locale lookups at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)


class SimDateFilter(logging.Filter):
    """Stamp records with the simulated date.

    A date passed with ``extra={"sim_date": ...}`` wins over the clock.
    """

    def __init__(self, clock: Callable[[], date | None] | None = None) -> None:
        super().__init__()
        self.clock = clock

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "sim_date", None) is None:
            today = self.clock() if self.clock is not None else None
            record.sim_date = today if today is not None else NO_SIM_DATE
        return True


class JsonFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        sim_date = getattr(record, "sim_date", None)
        if sim_date is not None and sim_date != NO_SIM_DATE:
            log_data["sim_date"] = str(sim_date)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name.

    Parameters
    ----------
    name : str
        Logger name (usually __name__).

    Returns
    -------
    logging.Logger
        Configured logger.
    """
    return logging.getLogger(name)
