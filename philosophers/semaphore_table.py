"""Dining table where the forks are one shared counting semaphore.

Each philosopher keeps its own idea of whether the simulation is running,
as a separate worker would, and watches its own hunger from a companion
thread. A central watcher ends the whole table once a death or the
completion of every philosopher's meals is signalled.
"""

from __future__ import annotations

import sys
import threading
from typing import TextIO

from philosophers.clock import now_ms
from philosophers.config import Settings, Status

_ACQUIRE_POLL_SECONDS = 0.01
_WATCH_POLL_SECONDS = 0.0002


class _Terminated(Exception):
    """The table has been shut down while a philosopher was busy."""


class SemaphorePhilosopher:
    """One diner sharing a pile of forks with everybody else."""

    def __init__(self, table: SemaphoreTable, philo_id: int) -> None:
        self.table = table
        self.id = philo_id
        self.status = Status.IDLE
        self.meals_eaten = 0
        self.last_eat_time = now_ms()
        self._running = True

    def _alive(self) -> bool:
        return self._running and self.table.running()

    def _take_fork(self) -> None:
        while not self.table.forks.acquire(timeout=_ACQUIRE_POLL_SECONDS):
            if not self.table.running():
                raise _Terminated
        self.table.print_message(self.id, "has taken a fork")

    def _put_forks(self) -> None:
        self.table.forks.release()
        self.table.forks.release()

    def _only_fork(self) -> bool:
        self._take_fork()
        try:
            self.table.pause(self.table.settings.time_to_die)
        finally:
            self.table.forks.release()
        return False

    def eat(self) -> bool:
        """Take two forks and eat; False if the philosopher cannot go on.

        On success both forks are still held.
        """
        if not self._alive():
            return False
        settings = self.table.settings
        try:
            if settings.philo_count == 1:
                return self._only_fork()
            self._take_fork()
            self._take_fork()
            self.status = Status.EATING
            self.table.print_message(self.id, "is eating")
            self.last_eat_time = now_ms()
            self.table.pause(settings.time_to_eat)
        except _Terminated:
            return False
        self.meals_eaten += 1
        if settings.must_eat is not None and self.meals_eaten == settings.must_eat:
            self.table.meals_done.release()
        return True

    def _sleep(self) -> bool:
        self.status = Status.SLEEPING
        self.table.print_message(self.id, "is sleeping")
        self._put_forks()
        if not self._alive():
            return False
        self.table.pause(self.table.settings.time_to_sleep)
        return True

    def _think(self) -> bool:
        self.status = Status.THINKING
        self.table.print_message(self.id, "is thinking")
        return self._alive()

    def _watch_hunger(self) -> None:
        settings = self.table.settings
        while self._alive():
            if now_ms() - self.last_eat_time > settings.time_to_die:
                self._running = False
                self.status = Status.DEAD
                self.table.print_death(self.id)
                self.table.death_signal.release()
                for _ in range(settings.philo_count):
                    self.table.meals_done.release()
                return
            self.table.pause_quietly(_WATCH_POLL_SECONDS)

    def live(self) -> None:
        """Run this philosopher's life until it dies or the table shuts down."""
        table = self.table
        self.last_eat_time = table.start_time
        table.start_gate.acquire()
        watcher = threading.Thread(target=self._watch_hunger)
        watcher.start()
        try:
            if self.id % 2 == 0:
                table.pause(table.settings.time_to_eat / 2)
            while self._alive():
                if not self.eat():
                    break
                if not self._alive():
                    self._put_forks()
                    break
                if not self._sleep():
                    break
                if not self._alive():
                    break
                if not self._think():
                    break
        except _Terminated:
            pass
        watcher.join()


class SemaphoreTable:
    """Shared state of one run: the fork pile, signals and output."""

    def __init__(self, settings: Settings, out: TextIO | None = None) -> None:
        self.settings = settings
        self._out = out if out is not None else sys.stdout
        self._print_lock = threading.Lock()
        self._terminated = threading.Event()
        count = settings.philo_count
        self.forks = threading.Semaphore(count)
        self.start_gate = threading.Semaphore(0)
        self.death_signal = threading.Semaphore(0)
        self.meals_done = threading.Semaphore(0)
        self.start_time = now_ms()
        self.dead_philosopher: int | None = None
        self.philosophers = [
            SemaphorePhilosopher(self, index + 1) for index in range(count)
        ]

    def running(self) -> bool:
        """Whether the table has not been shut down yet."""
        return not self._terminated.is_set()

    def stop(self) -> None:
        """Shut the table down; every philosopher stops at its next step."""
        self._terminated.set()

    def pause(self, duration_ms: float) -> None:
        """Wait ``duration_ms`` milliseconds, aborting if the table shuts down."""
        if self._terminated.wait(duration_ms / 1000):
            raise _Terminated

    def pause_quietly(self, seconds: float) -> None:
        """Wait up to ``seconds``, returning early if the table shuts down."""
        self._terminated.wait(seconds)

    def print_message(self, philo_id: int, message: str) -> None:
        """Write a timestamped event line unless the table has shut down."""
        with self._print_lock:
            if not self.running():
                return
            elapsed = now_ms() - self.start_time
            self._out.write(f"{elapsed} {philo_id} {message}\n")
            self._out.flush()

    def print_death(self, philo_id: int) -> None:
        """Write the death line and shut the table down, once only."""
        with self._print_lock:
            if not self.running():
                return
            elapsed = now_ms() - self.start_time
            self._out.write(f"{elapsed} {philo_id} died\n")
            self._out.flush()
            self.dead_philosopher = philo_id
            self.stop()

    def _watch_death(self) -> None:
        self.death_signal.acquire()
        self.stop()

    def _watch_meals(self) -> None:
        for _ in range(self.settings.philo_count):
            self.meals_done.acquire()
        self.death_signal.release()

    def run(self) -> int | None:
        """Run the simulation to its end; return the id of the philosopher who died."""
        self.start_time = now_ms()
        workers = [
            threading.Thread(target=philo.live) for philo in self.philosophers
        ]
        for worker in workers:
            worker.start()
        monitors = [threading.Thread(target=self._watch_death)]
        must_eat = self.settings.must_eat
        if must_eat is not None and must_eat > 0:
            monitors.append(threading.Thread(target=self._watch_meals))
        for monitor in monitors:
            monitor.start()
        for _ in workers:
            self.start_gate.release()
        for thread in monitors + workers:
            thread.join()
        return self.dead_philosopher