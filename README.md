# philosophers

This package simulates the dining philosophers problem. Philosophers sit at a round
table. Each one eats, then sleeps, then thinks. To eat, a philosopher needs two forks.
A philosopher who goes longer than the time to die without starting a meal dies, and
the simulation stops.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Usage

The package provides two commands. Both take the same arguments:

```
philo nb_philos time_to_die time_to_eat time_to_sleep [number_of_times_each_philosopher_must_eat]
philo_bonus nb_philos time_to_die time_to_eat time_to_sleep [number_of_times_each_philosopher_must_eat]
```

For example:

```
philo 4 800 200 200 5
```

- `philo` places one lock between each pair of neighbours, one lock per fork. Each
  philosopher takes the fork on the right first and then the fork on the left. If the
  number of philosophers is odd and the time to die is less than three times the time to
  eat, the start times are staggered so that the philosophers eat in waves. Otherwise the
  even-numbered philosophers wait one meal's length before they start.
- `philo_bonus` puts all the forks in one shared counting semaphore. Even-numbered
  philosophers wait half a meal's length before they start. Each philosopher has its own
  thread that watches how long it has gone without eating. A central monitor shuts the
  table down when a death is signalled or when every philosopher has eaten enough.

Every argument must consist of decimal digits only:

- `nb_philos`: 1 or more
- `time_to_die`, `time_to_eat`, `time_to_sleep`: more than 10 (milliseconds)
- `number_of_times_each_philosopher_must_eat`: 1 or more, optional

If the meal count is given, the simulation ends once every philosopher has eaten that
many times.

Each event is printed on its own line in the form `<elapsed ms> <id> <action>`:

```
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
200 1 is sleeping
400 1 is thinking
810 3 died
```

If the arguments are wrong, the command prints a usage message and exits with status 1.
Otherwise it runs the simulation and exits with status 0.

## Library use

```python
from philosophers.config import Settings
from philosophers.table import Table

settings = Settings.from_args(["5", "800", "200", "200", "3"])
dead = Table(settings).run()  # id of the philosopher who died, or None
```

- `philosophers.args.validate_args` checks a list of raw arguments, without the program
  name. It returns the arguments as integers, or raises `philosophers.args.InputError`.
  `philosophers.args.parse_int` reads a leading integer from a string.
- `philosophers.config.Settings` holds the parameters of a run. Times are in
  milliseconds, and `must_eat` is `None` when no meal count is given. It also computes
  the staggered start delays (`start_delay`, `needs_staggered_start`).
- `philosophers.table.Table` and `philosophers.semaphore_table.SemaphoreTable` each take
  a `Settings` and an optional `out` text stream, which defaults to standard output.
  Each has a `run()` method that returns the id of the philosopher who died, or `None`.
- `philosophers.cli.usage(program)` returns the help text. `philosophers.cli.main` and
  `philosophers.cli.main_bonus` are the two commands.

## Limitations

Both commands run every philosopher as a thread inside a single Python process. Neither
command starts separate processes. Timing is measured in whole milliseconds with polling
sleeps, so under heavy load the event times can drift by a few milliseconds.