"""Command-line entry point for the simulation."""

from __future__ import annotations

import os
import sys
from typing import Sequence

from dining.settings import InvalidArgumentError, parse_args
from dining.simulation import Simulation


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments, run the simulation and return the exit status."""
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "philo"
    if argv is None:
        argv = sys.argv[1:]
    try:
        settings = parse_args(argv)
    except InvalidArgumentError:
        print("Error: Invalid argument")
        print(
            f"Usage: {prog} number_of_philosophers time_to_die time_to_eat"
            " time_to_sleep [number_of_times_each_philosopher_must_eat]"
        )
        return 1
    try:
        simulation = Simulation(settings, sys.stdout)
    except MemoryError:
        print("Error: Initialization failed")
        return 1
    try:
        simulation.run()
    except RuntimeError:
        print("Error: Simulation failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())