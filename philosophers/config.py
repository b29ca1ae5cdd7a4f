"""Simulation settings and philosopher states."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from philosophers.args import validate_args


class Status(enum.IntEnum):
    """What a philosopher is currently doing."""

    EATING = 0
    SLEEPING = 1
    THINKING = 2
    DEAD = 3
    IDLE = 4


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation run; times are in milliseconds."""

    philo_count: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    must_eat: int | None = None

    @classmethod
    def from_args(cls, args) -> Settings:
        """Build settings from command-line arguments (program name excluded)."""
        values = validate_args(args)
        must_eat = values[4] if len(values) == 5 else None
        return cls(values[0], values[1], values[2], values[3], must_eat)

    def odd_count(self) -> int:
        """Number of odd-numbered philosophers, or 0 for tables of two or fewer."""
        if self.philo_count > 2:
            return (self.philo_count + 1) // 2
        return 0

    def eat_interval(self) -> int:
        """Gap between successive staggered starts, at least 1 when staggering applies."""
        if self.philo_count <= 2:
            return 0
        interval = self.time_to_eat // (self.odd_count() - 1)
        return interval if interval > 0 else 1

    def start_delay(self, philo_id: int) -> int:
        """Initial delay before philosopher ``philo_id`` (1-based) first tries to eat."""
        interval = self.eat_interval()
        if philo_id % 2 == 1:
            delay = (philo_id - 1) // 2 * interval
        else:
            delay = (self.odd_count() + philo_id // 2 - 1) * interval
        if delay >= self.time_to_die:
            delay -= self.time_to_die
        return delay

    def needs_staggered_start(self) -> bool:
        """True when an odd table would starve without staggered starts."""
        return self.philo_count % 2 == 1 and self.time_to_die < 3 * self.time_to_eat