"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys
from typing import Sequence

from philosophers.parsing import InvalidParameters, parse_args
from philosophers.simulation import run_simulation


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation from command-line arguments; returns the exit status.

    Arguments: ``count time_to_die time_to_eat time_to_sleep [turns_to_eat]``,
    with times in milliseconds.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        settings = parse_args(args)
    except InvalidParameters:
        print("Invalid parameters")
        return 1
    run_simulation(settings, sys.stdout)
    print("Program exit")
    return 0


if __name__ == "__main__":
    sys.exit(main())