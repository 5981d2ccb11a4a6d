"""The watcher that detects starvation and the end of all meals."""

from __future__ import annotations

import time

from philosophers.routine import is_dead

_SWEEP_PAUSE_SECONDS = 0.0001


def _join_all(table) -> None:
    for philosopher in table.philosophers:
        if philosopher.thread is not None:
            philosopher.thread.join()


def _someone_starved(table) -> bool:
    for philosopher in table.philosophers:
        if is_dead(table, philosopher):
            _join_all(table)
            return True
    return False


def everyone_ate(table) -> bool:
    """Whether every philosopher has eaten exactly the required number of meals."""
    required = table.settings.turns_to_eat
    for philosopher in table.philosophers:
        with philosopher.lock:
            if philosopher.turns != required:
                return False
    return True


def monitor_endlessly(table) -> bool:
    """Watch until a philosopher starves; always returns True."""
    while True:
        if _someone_starved(table):
            return True
        time.sleep(_SWEEP_PAUSE_SECONDS)


def monitor_turns(table) -> bool:
    """Watch until everyone has eaten; True if a philosopher starved first."""
    while not everyone_ate(table):
        if _someone_starved(table):
            return True
        time.sleep(_SWEEP_PAUSE_SECONDS)
    return False


def monitor(table) -> bool:
    """Watch the table; returns True if a philosopher starved."""
    if table.settings.turns_to_eat == 0:
        return monitor_endlessly(table)
    return monitor_turns(table)