"""What each philosopher does: take forks, eat, sleep, think, and starve."""

from __future__ import annotations

import time

from philosophers.output import Action, announce
from philosophers.timing import sleep_unless_ended

_FORK_POLL_SECONDS = 0.0001
_EVEN_START_DELAY_SECONDS = 0.015


def _now_us() -> int:
    return time.time_ns() // 1000


def _release_forks(philosopher) -> None:
    philosopher.min_fork().lock.release()
    philosopher.max_fork().lock.release()


def signal_death(table, philosopher) -> None:
    """End the simulation and report that ``philosopher`` died."""
    table.end()
    announce(table, philosopher.index, Action.DIED)


def is_dead(table, philosopher) -> bool:
    """Check whether ``philosopher`` has starved, ending the simulation if so.

    A philosopher who is eating never counts as starving. Before the first
    meal the time is measured from the start of the simulation.
    """
    with philosopher.lock:
        if philosopher.is_eating:
            return False
        if philosopher.turns == 0:
            reference = table.start_us
        else:
            reference = philosopher.last_meal_us
        starved_for = _now_us() - reference
    if starved_for > table.settings.time_to_die:
        signal_death(table, philosopher)
        return True
    return False


def _fork_order(table, philosopher):
    if table.settings.count % 2 != 0:
        return philosopher.min_fork(), philosopher.max_fork()
    return philosopher.max_fork(), philosopher.min_fork()


def take_forks(table, philosopher) -> bool:
    """Pick up both forks, returning True once both are held.

    A philosopher waits while it was the last to use either fork, so that
    neighbours get their turn. Returns False, holding no fork, when the
    simulation ends or when there is only one fork on the table.
    """
    while (
        philosopher.min_fork_last_user() == philosopher.index
        or philosopher.max_fork_last_user() == philosopher.index
    ):
        time.sleep(_FORK_POLL_SECONDS)
        if table.someone_is_dead():
            return False

    first, second = _fork_order(table, philosopher)
    first.lock.acquire()
    announce(table, philosopher.index, Action.TOOK_FORK)
    if table.someone_is_dead() or table.settings.count == 1:
        first.lock.release()
        return False
    second.lock.acquire()
    announce(table, philosopher.index, Action.TOOK_FORK)
    return True


def eat(table, philosopher) -> None:
    """Eat with both forks held, then put them down."""
    with philosopher.lock:
        philosopher.is_eating = True
        philosopher.last_meal_us = _now_us()
        philosopher.turns += 1
    announce(table, philosopher.index, Action.EATING)
    sleep_unless_ended(table.settings.time_to_eat, table)
    philosopher.left_fork.last_user = philosopher.index
    philosopher.right_fork.last_user = philosopher.index
    _release_forks(philosopher)
    with philosopher.lock:
        philosopher.is_eating = False


def sleep(table, philosopher) -> bool:
    """Sleep; returns False if the simulation ended before waking."""
    announce(table, philosopher.index, Action.SLEEPING)
    return sleep_unless_ended(table.settings.time_to_sleep, table)


def think(table, philosopher) -> None:
    """Report that ``philosopher`` is thinking."""
    announce(table, philosopher.index, Action.THINKING)


def live_one_cycle(table, philosopher) -> bool:
    """Run one think-eat-sleep-think cycle; False means the simulation ended."""
    if philosopher.turns == 0:
        think(table, philosopher)
        if philosopher.index % 2 == 0:
            time.sleep(_EVEN_START_DELAY_SECONDS)

    if not take_forks(table, philosopher):
        return False
    if table.someone_is_dead():
        _release_forks(philosopher)
        return False
    eat(table, philosopher)
    if table.someone_is_dead():
        return False
    if not sleep(table, philosopher):
        return False
    if table.someone_is_dead():
        return False
    think(table, philosopher)
    return not table.someone_is_dead()


def run_philosopher(table, philosopher) -> bool:
    """Live until the meal count is reached, or forever when it is unlimited.

    Returns True when every required meal was eaten, False when the
    simulation ended first.
    """
    turns_to_eat = table.settings.turns_to_eat
    if turns_to_eat > 0:
        for _ in range(turns_to_eat):
            if not live_one_cycle(table, philosopher):
                return False
        return True
    while True:
        if not live_one_cycle(table, philosopher):
            return False