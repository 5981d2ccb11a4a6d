# philosophers

A simulation of the dining philosophers problem. Each philosopher runs in its
own thread and repeatedly takes two forks, eats, sleeps and thinks. A monitor
watches every philosopher and ends the simulation as soon as one of them has
gone too long without eating. If a number of meals is given, the simulation
also ends once every philosopher has eaten that many times.

## Installation

```
pip install .
```

## Usage

```
philosophers number_of_philosophers time_to_die time_to_eat time_to_sleep [meals]
```

- `number_of_philosophers`: how many philosophers sit at the table (1 to 200).
  There are as many forks as philosophers.
- `time_to_die`: milliseconds a philosopher may go without eating. The time
  runs from the start of the last meal, or from the start of the simulation
  before the first one. A philosopher who is eating is never counted as
  starving.
- `time_to_eat`: milliseconds a meal takes. The philosopher holds both forks
  throughout.
- `time_to_sleep`: milliseconds spent sleeping after a meal.
- `meals` (optional): stop once every philosopher has eaten this many times.
  Without it the simulation runs until a philosopher dies.

There must be four or five arguments, and all values must be positive whole
numbers. Numbers are read the way C's `atoi` reads them: leading whitespace
and one sign are accepted, and reading stops at the first non-digit. When the
arguments are rejected the program prints `Invalid parameters` and exits with
status 1.

Each event is printed as one line with the milliseconds since the start, the
philosopher's number and what happened:

```
0 1 is thinking
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
200 1 is sleeping
...
310 3 died
Program exit
```

After a philosopher dies, nothing else is printed about the others; when the
simulation is over the program prints `Program exit` and exits with status 0.

### Examples

```
philosophers 5 800 200 200        # runs until someone dies
philosophers 5 800 200 200 7      # stops after everyone has eaten 7 times
philosophers 4 310 200 100        # a philosopher dies
philosophers 1 800 200 200        # one fork only: the philosopher dies
```

## Using it from Python

```python
import sys

from philosophers.parsing import parse_args
from philosophers.simulation import run_simulation

settings = parse_args(["5", "800", "200", "200", "3"])
table = run_simulation(settings, sys.stdout)
print(table.describe())
```

- `philosophers.parsing.parse_args` takes the arguments after the program name
  and returns a `Settings` (durations in microseconds). It raises
  `InvalidParameters`, a `ValueError`, when the arguments are rejected.
- `philosophers.simulation.run_simulation` runs the simulation to its end,
  writing status lines to the given stream (standard output by default), and
  returns the `Table` with its `forks` and `philosophers`.
- `philosophers.cli.main` is the command itself; it takes a list of arguments
  and returns the exit status.

## Running the tests

```
pip install ".[test]"
pytest
```