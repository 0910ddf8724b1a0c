"""Command-line settings for the dining philosophers simulation."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


class InvalidArgumentError(ValueError):
    """Raised when the simulation arguments are missing or out of range."""


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation run; times are in milliseconds."""

    num_philos: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    must_eat_count: int | None = None


def _atoi(text: str) -> int:
    """Read a leading integer the lenient way: junk after the digits is ignored, no digits gives 0."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_args(argv: Sequence[str]) -> Settings:
    """Build settings from the arguments that follow the program name."""
    if not 4 <= len(argv) <= 5:
        raise InvalidArgumentError(f"expected 4 or 5 arguments, got {len(argv)}")
    num_philos, time_to_die, time_to_eat, time_to_sleep = (_atoi(arg) for arg in argv[:4])
    must_eat_count = _atoi(argv[4]) if len(argv) == 5 else None
    if min(num_philos, time_to_die, time_to_eat, time_to_sleep) <= 0:
        raise InvalidArgumentError("all counts and times must be positive")
    if must_eat_count is not None and must_eat_count <= 0:
        raise InvalidArgumentError("the meal count must be positive")
    return Settings(num_philos, time_to_die, time_to_eat, time_to_sleep, must_eat_count)