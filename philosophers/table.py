"""Thread-based dining table where each fork is a lock."""

from __future__ import annotations

import sys
import threading
import time
from typing import TextIO

from philosophers.clock import now_ms, sleep_ms
from philosophers.config import Settings, Status

_FULL_POLL_SECONDS = 0.001
_ALIVE_POLL_SECONDS = 0.0001


class Philosopher:
    """One diner: a thread that alternates eating, sleeping and thinking."""

    def __init__(
        self,
        table: Table,
        philo_id: int,
        left_fork: threading.Lock,
        right_fork: threading.Lock,
    ) -> None:
        self.table = table
        self.id = philo_id
        self.left_fork = left_fork
        self.right_fork = right_fork
        self.status = Status.IDLE
        self.meals_eaten = 0
        self.last_eat_time = now_ms()
        self.start_delay = table.settings.start_delay(philo_id)

    def set_status(self, status: Status) -> None:
        """Change the status unless the philosopher is already dead."""
        if self.status is not Status.DEAD:
            self.status = status

    def time_over(self) -> bool:
        """Return True, marking the philosopher dead, if it starved too long."""
        if now_ms() - self.last_eat_time > self.table.settings.time_to_die:
            self.set_status(Status.DEAD)
            return True
        return False

    def _dead(self) -> bool:
        return self.status is Status.DEAD

    def _take_fork(self, fork: threading.Lock) -> bool:
        if self.time_over() or self._dead():
            return False
        fork.acquire()
        self.table.print_message(self.id, "has taken a fork")
        return True

    def _take_only_fork(self) -> bool:
        with self.left_fork:
            self.table.print_message(self.id, "has taken a fork")
            sleep_ms(self.table.settings.time_to_die)
        self.set_status(Status.DEAD)
        return False

    def _take_forks(self) -> bool:
        if self.table.settings.philo_count == 1:
            return self._take_only_fork()
        if not self._take_fork(self.right_fork):
            return False
        if not self._take_fork(self.left_fork):
            self.right_fork.release()
            return False
        return True

    def _release_forks(self) -> None:
        self.left_fork.release()
        self.right_fork.release()

    def eat(self) -> bool:
        """Take both forks and eat; False if the philosopher died trying.

        On success both forks are still held.
        """
        if not self._take_forks():
            return False
        self.set_status(Status.EATING)
        self.table.print_message(self.id, "is eating")
        self.last_eat_time = now_ms()
        sleep_ms(self.table.settings.time_to_eat)
        self.meals_eaten += 1
        return True

    def _sleep(self) -> bool:
        self.set_status(Status.SLEEPING)
        if self._dead():
            self._release_forks()
            return False
        self.table.print_message(self.id, "is sleeping")
        self._release_forks()
        if self._dead():
            return False
        sleep_ms(self.table.settings.time_to_sleep)
        return True

    def _think(self) -> bool:
        self.set_status(Status.THINKING)
        if self._dead():
            return False
        self.table.print_message(self.id, "is thinking")
        return True

    def live(self, staggered: bool) -> None:
        """Run the philosopher's life until it or the simulation ends."""
        self.table.wait_for_start()
        self.last_eat_time = self.table.start_time
        if staggered:
            sleep_ms(self.start_delay)
        elif self.id % 2 == 0:
            sleep_ms(self.table.settings.time_to_eat)
        while not self._dead():
            if not self.eat():
                break
            if self._dead():
                self._release_forks()
                break
            if not self._sleep():
                break
            if self._dead():
                break
            if not self._think():
                break


class Table:
    """The shared state of one simulation: forks, philosophers and output."""

    def __init__(self, settings: Settings, out: TextIO | None = None) -> None:
        self.settings = settings
        self._out = out if out is not None else sys.stdout
        self._print_lock = threading.Lock()
        self._running_lock = threading.Lock()
        self._running = True
        self._started = threading.Event()
        self.start_time = 0
        self.dead_philosopher: int | None = None
        count = settings.philo_count
        self.forks = [threading.Lock() for _ in range(count)]
        self.philosophers = [
            Philosopher(self, index + 1, self.forks[index], self.forks[index - 1])
            for index in range(count)
        ]

    def running(self) -> bool:
        """Whether the simulation is still going."""
        with self._running_lock:
            return self._running

    def stop(self) -> None:
        """Mark the simulation as finished."""
        with self._running_lock:
            self._running = False

    def wait_for_start(self) -> None:
        """Block until the simulation clock has been started."""
        self._started.wait()

    def _elapsed(self) -> int:
        return now_ms() - self.start_time

    def print_message(self, philo_id: int, message: str) -> None:
        """Write a timestamped event line while the simulation is running."""
        with self._print_lock:
            elapsed = self._elapsed()
            if self.running():
                self._out.write(f"{elapsed} {philo_id} {message}\n")
                self._out.flush()

    def print_death(self, philo_id: int) -> None:
        """Write the death line, regardless of whether the simulation stopped."""
        with self._print_lock:
            self._out.write(f"{self._elapsed()} {philo_id} died\n")
            self._out.flush()

    def all_full(self) -> bool:
        """True when every philosopher has eaten the required number of meals."""
        must_eat = self.settings.must_eat
        if must_eat is None:
            return False
        for philo in self.philosophers:
            if not self.running():
                return True
            if philo.meals_eaten < must_eat:
                return False
        return True

    def _mark_all_dead(self) -> None:
        for philo in self.philosophers:
            philo.set_status(Status.DEAD)

    def _watch_full(self) -> None:
        while self.running():
            time.sleep(_FULL_POLL_SECONDS)
            if self.all_full():
                break
        if self.running():
            self.stop()
            self._mark_all_dead()

    def _watch_alive(self) -> None:
        while self.running():
            for philo in self.philosophers:
                if not self.running():
                    return
                if philo.time_over() and self.running():
                    self.stop()
                    self._mark_all_dead()
                    self.dead_philosopher = philo.id
                    self.print_death(philo.id)
                    return
            time.sleep(_ALIVE_POLL_SECONDS)

    def run(self) -> int | None:
        """Run the simulation to its end; return the id of the philosopher who died."""
        staggered = self.settings.needs_staggered_start()
        threads = [
            threading.Thread(target=philo.live, args=(staggered,))
            for philo in self.philosophers
        ]
        for thread in threads:
            thread.start()
        self.start_time = now_ms()
        self._started.set()
        monitors = [threading.Thread(target=self._watch_alive)]
        if self.settings.must_eat is not None and self.settings.must_eat > 0:
            monitors.append(threading.Thread(target=self._watch_full))
        for monitor in monitors:
            monitor.start()
        for thread in monitors + threads:
            thread.join()
        return self.dead_philosopher