"""Running a whole dining philosophers simulation."""

from __future__ import annotations

import threading
from typing import TextIO

from philosophers.monitor import monitor
from philosophers.parsing import Settings
from philosophers.routine import run_philosopher
from philosophers.table import Table


def run_simulation(settings: Settings, stream: TextIO | None = None) -> Table:
    """Seat the philosophers, run them until the end, and return the table.

    The simulation ends when a philosopher starves, or when every philosopher
    has eaten the required number of meals. Status lines go to ``stream``,
    standard output by default.
    """
    table = Table(settings, stream)
    for philosopher in table.philosophers:
        philosopher.last_meal_us = table.start_us
        philosopher.thread = threading.Thread(
            target=run_philosopher,
            args=(table, philosopher),
            name=f"philosopher-{philosopher.index}",
            daemon=True,
        )
        philosopher.thread.start()

    if not monitor(table):
        for philosopher in table.philosophers:
            philosopher.thread.join()
    return table