"""Status messages printed by the philosophers."""

from __future__ import annotations

from enum import IntEnum


class Action(IntEnum):
    """What a philosopher reports doing."""

    EATING = 1
    SLEEPING = 2
    DEAD = 3
    TOOK_FORK = 4
    TOOK_SECOND_FORK = 5
    DIED = 6
    THINKING = 7

    @property
    def message(self) -> str:
        """The text printed after the timestamp and index."""
        return _MESSAGES[self]


_MESSAGES = {
    Action.EATING: "is eating\n",
    Action.SLEEPING: "is sleeping\n",
    Action.DEAD: "is dead\n",
    Action.TOOK_FORK: "has taken a fork\n",
    Action.TOOK_SECOND_FORK: "has taken a fork\n",
    Action.DIED: "died\n",
    Action.THINKING: "is thinking\n",
}

_DEBUG_MESSAGES = {
    9: "done eating\n",
    10: "is no more using a min fork\n",
    11: "is no more using max fork\n",
    12: "done thinking\n",
    13: "ended usleep as smn is dead\n",
    14: "usleep is going to start\n",
    15: "usleep time target achived:",
    16: "ready to check forks\n",
    17: "will check odd even\n",
    18: "unlocked my forks\n",
    19: "                      checking smn is dead\n",
    20: "last user of fork is me\n",
}


def debug_message(code: int) -> str | None:
    """Return the diagnostic text for a debug code, or None if unknown."""
    return _DEBUG_MESSAGES.get(code)


def format_line(timestamp: int, index: int, action: Action) -> str:
    """Render one status line: ``<ms> <index> <message>``."""
    return f"{timestamp} {index} {Action(action).message}"


def announce(table, index: int, action: Action) -> bool:
    """Print a status line for philosopher ``index`` on the table's stream.

    Once the simulation has ended only a death is still printed. Returns
    whether a line was written.
    """
    action = Action(action)
    with table.print_lock:
        if table.someone_is_dead() and action is not Action.DIED:
            return False
        table.stream.write(format_line(table.elapsed_ms(), index, action))
        table.stream.flush()
    return True