# dining

A threaded simulation of the dining philosophers problem.

A number of philosophers sit at a round table with one fork between each pair
of neighbours. Each philosopher runs in its own thread and repeatedly takes
the fork on the right and then the one on the left, eats, puts both forks
down, sleeps and thinks. A monitor thread watches the table. If a philosopher
goes longer than the allowed time without starting a meal, that philosopher's
death is reported and the simulation stops. If a required number of meals was
given and every philosopher has eaten at least that many, the simulation
also ends.

## Installation

```
pip install .
```

## Usage

```
dining number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_times_each_philosopher_must_eat]
```

All times are in milliseconds, and every value must be greater than zero.

- `number_of_philosophers`: how many philosophers, and so how many forks.
- `time_to_die`: a philosopher dies if more than this much time passes
  without the start of a meal.
- `time_to_eat`: how long a meal takes; both forks are held throughout.
- `time_to_sleep`: how long a philosopher sleeps after eating.
- `number_of_times_each_philosopher_must_eat` (optional): each philosopher
  stops once it has eaten this many times, and the simulation ends when all
  have. Without it, the simulation runs until a philosopher dies.

Numbers are read leniently: leading whitespace and a sign are accepted,
anything after the leading digits is ignored, and text with no leading digits
counts as 0 (and so is rejected).

Example:

```
dining 5 800 200 200 7
```

Each state change is printed on its own line as the wall-clock time in
milliseconds, the philosopher's number (counted from 1) and the event:

```
1712480000123 2 has taken a fork
1712480000123 2 has taken a fork
1712480000123 2 is eating
1712480000323 2 is sleeping
1712480000523 2 is thinking
```

A death is printed as the time in milliseconds since the simulation started,
the philosopher's number and `died`. Nothing more is printed after a death.

A single philosopher has only one fork: it takes it, waits, and dies.

If the number of arguments is wrong or a value is not positive, the command
prints `Error: Invalid argument` and a usage line and exits with status 1.

## Using it from Python

```python
import io

from dining.settings import InvalidArgumentError, parse_args
from dining.simulation import Simulation

try:
    settings = parse_args(["4", "410", "200", "200", "3"])
except InvalidArgumentError:
    raise SystemExit(1)

log = io.StringIO()
simulation = Simulation(settings, log)
simulation.run()
print(log.getvalue())
print([p.meals_eaten for p in simulation.philosophers])
```

- `dining.settings.parse_args(argv)` takes the arguments that follow the
  program name (four or five strings) and returns a frozen `Settings` with
  `num_philos`, `time_to_die`, `time_to_eat`, `time_to_sleep` and
  `must_eat_count` (`None` when no meal count was given). It raises
  `InvalidArgumentError`, a `ValueError`, for bad input.
- `dining.simulation.Simulation(settings, out)` sets up the forks and
  `Philosopher` objects; `out` is any text stream and defaults to standard
  output. `run()` starts the philosopher threads and the monitor and returns
  once all of them have finished. Afterwards `someone_died` tells whether the
  run ended in a death.
- `dining.cli.main(argv=None)` is the command's entry point; it returns the
  exit status.
- `dining.timing` provides `now_ms()`, the wall-clock time in whole
  milliseconds, and `precise_sleep(ms)`, which polls until at least `ms`
  milliseconds have passed.

## Running the tests

```
pip install ".[test]"
pytest
```