"""Command-line entry points for the dining philosophers simulation."""

from __future__ import annotations

import sys
from typing import Callable, Sequence

from philosophers.args import InputError
from philosophers.config import Settings
from philosophers.semaphore_table import SemaphoreTable
from philosophers.table import Table

EXIT_OK = 0
EXIT_WRONG_INPUT = 1


def usage(program: str) -> str:
    """Return the help text shown when the arguments are rejected."""
    return (
        "\t\tWRONG INPUT!\n\n"
        f"./{program} nb_philos time_to_die time_to_eat time_to_sleep "
        "number_of_times_each_philosopher_must_eat (optional argument)\n"
        "Example:\n\n"
        f"./{program} 4 800 200 200 5\n\n"
        "nb_philos: +1~\n"
        "time_to_die: +11~\n"
        "time_to_eat: +11~\n"
        "time_to_sleep: +11~\n"
        "number_of_times_each_philosopher_must_eat: +1~\n"
    )


def _run(
    argv: Sequence[str] | None,
    program: str,
    make_table: Callable[[Settings], Table | SemaphoreTable],
) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = Settings.from_args(args)
    except InputError:
        sys.stdout.write(usage(program))
        sys.stdout.flush()
        return EXIT_WRONG_INPUT
    make_table(settings).run()
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation with one lock per fork; return the exit status."""
    return _run(argv, "philo", Table)


def main_bonus(argv: Sequence[str] | None = None) -> int:
    """Run the simulation with a shared pile of forks; return the exit status."""
    return _run(argv, "philo_bonus", SemaphoreTable)


if __name__ == "__main__":
    sys.exit(main())