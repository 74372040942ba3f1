# philo

This package simulates the dining philosophers problem. Each philosopher
runs in its own thread. Each one shares a fork, which is a lock, with each
neighbour. A monitor thread watches the table. The run ends when a
philosopher starves, or when every philosopher has eaten a given number of
meals.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_times_each_philosopher_must_eat]
```

You can also start it with `python -m philo.simulation` and the same
arguments.

All times are in milliseconds. The arguments are checked as follows:

- Each argument may contain only the digits `0`–`9`. Signs and spaces are
  rejected.
- The number of philosophers must be from 1 to 200.
- The three times must be greater than zero.
- The optional meal count may be zero or more.

Example:

```
philo 5 800 200 200 7
```

Each change of state is printed as one line:

```
<milliseconds since start> <philosopher id> <action>
```

The actions are `has taken a fork`, `is eating`, `is sleeping`,
`is thinking` and `died`.

- When a philosopher starves, a `died` line is printed for them. After
  that, no more status lines are printed.
- When a meal count is given and every philosopher has started that many
  meals, a green line is printed:
  `✓ SIMULATION SUCCESSFUL:All philosophers ate N times!`
- A philosopher who sits alone has only one fork. They hold it until they
  starve.

If the arguments are invalid, a message goes to standard error and the
command exits with status 255. Examples of messages are
`Wrong argument count` and `Invalid value for time to die`.

## Library use

```python
import sys

from philo.parsing import parse_settings
from philo.simulation import run

settings = parse_settings(["4", "410", "200", "200", "3"])
table = run(settings, sys.stdout)
print(table.is_finished())  # True once the run is over
```

The modules are:

- `philo.parsing`
  - `parse_settings(args)` checks the arguments and returns a frozen
    `Settings` dataclass. It raises `ArgumentError`, a subclass of
    `ValueError`, on bad input.
  - `atoi(text)` parses a leading integer the way C's `atoi` does.
  - `is_digits(text)` reports whether a string holds only digits.
- `philo.clock`
  - `current_time_ms()` returns the wall-clock time in milliseconds.
  - `precise_sleep(ms)` waits at least `ms` milliseconds, checking in short
    steps.
- `philo.table`
  - `Table` holds the philosophers, the forks and the shared locks. Its
    methods are `elapsed`, `print_status`, `is_finished`, `stop`,
    `record_meal`, `has_starved` and `meals_eaten`.
  - `Philosopher` is a single seat at the table.
- `philo.routine`
  - `eat`, `sleep` and `think` are the steps of one turn.
  - `philosopher_routine(table, philosopher)` repeats those steps until the
    run ends.
- `philo.monitor`
  - `check_deaths`, `all_ate_enough` and `check_meals` check the table for
    the end of the run.
  - `monitor(table)` loops over these checks until one of them ends the run.
- `philo.simulation`
  - `run(settings, out=None)` starts all the threads, waits for them to
    finish and returns the `Table`.
  - `main(argv=None)` is the command.

## Tests

```
pip install ".[test]"
pytest
```