"""Command-line argument parsing for the dining philosophers simulation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

MAX_PHILOSOPHERS = 200

_WHITESPACE = "\n\t\f\v\r "
_DIGITS = "0123456789"


class InvalidParameters(ValueError):
    """Raised when the simulation arguments are missing or out of range."""


@dataclass(frozen=True)
class Settings:
    """Simulation parameters; all durations are in microseconds.

    A ``turns_to_eat`` of zero means the philosophers eat without limit.
    """

    count: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    turns_to_eat: int = 0


def _wrap_int32(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping on overflow."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def atoi(text: str) -> int:
    """Parse a leading integer the way C's ``atoi`` does.

    Leading whitespace is skipped, one sign is accepted and digits are read
    until the first non-digit. Anything unparsable yields 0. The result wraps
    like a 32-bit ``int``.
    """
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    number = 0
    for char in stripped:
        if char not in _DIGITS:
            break
        number = number * 10 + int(char)
    return _wrap_int32(number * sign)


def validate(arg: str | None) -> int:
    """Return the positive integer in ``arg``, or 0 if it is not one."""
    if not arg:
        return 0
    value = atoi(arg)
    return value if value > 0 else 0


def parse_args(args: Sequence[str]) -> Settings:
    """Build :class:`Settings` from the arguments after the program name.

    Expects ``count time_to_die time_to_eat time_to_sleep [turns_to_eat]``
    with times in milliseconds.
    """
    args = list(args)
    if len(args) not in (4, 5):
        raise InvalidParameters("expected 4 or 5 arguments")

    count = validate(args[0])
    time_to_die = _wrap_int32(validate(args[1]) * 1000)
    time_to_eat = _wrap_int32(validate(args[2]) * 1000)
    time_to_sleep = _wrap_int32(validate(args[3]) * 1000)

    turns_to_eat = 0
    if len(args) == 5:
        turns_to_eat = validate(args[4])
        if turns_to_eat == 0:
            raise InvalidParameters("number of meals must be a positive integer")

    if not (time_to_eat > 0 and time_to_die > 0 and time_to_sleep > 0 and count > 0):
        raise InvalidParameters("all values must be positive integers")
    if count > MAX_PHILOSOPHERS:
        raise InvalidParameters(f"at most {MAX_PHILOSOPHERS} philosophers are allowed")

    return Settings(
        count=count,
        time_to_die=time_to_die,
        time_to_eat=time_to_eat,
        time_to_sleep=time_to_sleep,
        turns_to_eat=turns_to_eat,
    )