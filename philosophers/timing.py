"""Clock helpers and a sleep that stops early when the simulation ends."""

from __future__ import annotations

import time


def now_ms() -> int:
    """Wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def time_diff(past: int, present: int) -> int:
    """Time elapsed from ``past`` to ``present``."""
    return present - past


def sleep_unless_ended(duration_us: int, table) -> bool:
    """Sleep for ``duration_us`` microseconds, polling the table's end flag.

    Most of the time is slept in one go, the rest in short steps. Returns
    True if the full duration passed and False if the simulation ended first.
    """
    duration_ms = int(duration_us) // 1000
    start = now_ms()
    time.sleep(max(0, 900 * duration_ms) / 1_000_000)
    while not table.someone_is_dead():
        if time_diff(start, now_ms()) >= duration_ms:
            return True
        time.sleep(0.0001)
    return False