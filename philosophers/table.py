"""The shared state of the simulation: forks, philosophers and the table."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass, field
from typing import TextIO

from philosophers.parsing import Settings


def _now_us() -> int:
    return time.time_ns() // 1000


@dataclass(eq=False)
class Fork:
    """A fork numbered from 1; ``last_user`` is the last philosopher to eat with it."""

    number: int
    last_user: int = 0
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


@dataclass(eq=False)
class Philosopher:
    """A seat at the table, between its left and right forks."""

    index: int
    left_fork: Fork
    right_fork: Fork
    last_meal_us: int = 0
    turns: int = 0
    is_eating: bool = False
    must_die: bool = False
    thread: threading.Thread | None = field(default=None, repr=False)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def min_fork(self) -> Fork:
        """The lower-numbered of the two forks."""
        if self.left_fork.number < self.right_fork.number:
            return self.left_fork
        return self.right_fork

    def max_fork(self) -> Fork:
        """The higher-numbered of the two forks."""
        if self.left_fork.number > self.right_fork.number:
            return self.left_fork
        return self.right_fork

    def min_fork_last_user(self) -> int:
        """Index of the last philosopher who ate with the lower-numbered fork."""
        fork = self.min_fork()
        with fork.lock:
            return fork.last_user

    def max_fork_last_user(self) -> int:
        """Index of the last philosopher who ate with the higher-numbered fork."""
        fork = self.max_fork()
        with fork.lock:
            return fork.last_user

    def describe(self) -> str:
        """One diagnostic line describing this philosopher."""
        return (
            f"Philo index {self.index}; "
            f"last_eating_time {self.last_meal_us // 1_000_000}; "
            f"Left fork {self.left_fork.number}; "
            f"Right fork {self.right_fork.number}; "
            f"must die {int(self.must_die)}.\n"
        )


class Table:
    """Forks, philosophers and the flag that ends the simulation."""

    def __init__(self, settings: Settings, stream: TextIO | None = None) -> None:
        self.settings = settings
        self.stream = stream if stream is not None else sys.stdout
        self.print_lock = threading.Lock()
        self._state_lock = threading.Lock()
        self._must_end = False
        self.start_us = _now_us()

        count = settings.count
        self.forks = [Fork(number) for number in range(1, count + 1)]
        self.philosophers = [
            Philosopher(
                index=position + 1,
                left_fork=fork,
                right_fork=self.forks[(position + 1) % count],
                last_meal_us=self.start_us,
            )
            for position, fork in enumerate(self.forks)
        ]

    def someone_is_dead(self) -> bool:
        """Whether the simulation has been told to stop."""
        with self._state_lock:
            return self._must_end

    def end(self) -> None:
        """Tell every philosopher to stop."""
        with self._state_lock:
            self._must_end = True

    def elapsed_ms(self) -> int:
        """Milliseconds since the simulation started."""
        return _now_us() // 1000 - self.start_us // 1000

    def describe(self) -> str:
        """Diagnostic lines for every philosopher."""
        return "".join(philosopher.describe() for philosopher in self.philosophers)