"""Shared state of a dining table: philosophers, forks and locks."""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass, field
from typing import TextIO

from philo.clock import current_time_ms
from philo.parsing import Settings


@dataclass(eq=False)
class Philosopher:
    """One seat at the table; times are in milliseconds."""

    id: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    left_fork: threading.Lock
    right_fork: threading.Lock
    last_meal: int = field(default_factory=current_time_ms)
    meals_eaten: int = 0
    eating: bool = False


class Table:
    """Everything the philosophers and the monitor share during a run."""

    def __init__(self, settings: Settings, out: TextIO | None = None) -> None:
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self.write_lock = threading.Lock()
        self.meal_lock = threading.Lock()
        self.dead_lock = threading.Lock()
        self._finished = False
        self.start_time = current_time_ms()
        count = settings.number_of_philosophers
        self.forks = [threading.Lock() for _ in range(count)]
        self.philosophers = [
            Philosopher(
                id=index + 1,
                time_to_die=settings.time_to_die,
                time_to_eat=settings.time_to_eat,
                time_to_sleep=settings.time_to_sleep,
                left_fork=self.forks[index - 1],
                right_fork=fork,
            )
            for index, fork in enumerate(self.forks)
        ]

    def elapsed(self) -> int:
        """Milliseconds since the table was set."""
        return current_time_ms() - self.start_time

    def print_status(self, philosopher: Philosopher, message: str) -> bool:
        """Print a timestamped status line unless the run has finished.

        Returns True if the line was written.
        """
        with self.write_lock:
            timestamp = self.elapsed()
            if self.is_finished():
                return False
            print(f"{timestamp} {philosopher.id} {message}", file=self.out, flush=True)
            return True

    def is_finished(self) -> bool:
        """True once a philosopher has died or everyone has eaten enough."""
        with self.dead_lock:
            return self._finished

    def stop(self) -> None:
        """Mark the run as finished."""
        with self.dead_lock:
            self._finished = True

    def record_meal(self, philosopher: Philosopher) -> None:
        """Note that a philosopher has just started a meal."""
        with self.meal_lock:
            philosopher.last_meal = current_time_ms()
            philosopher.meals_eaten += 1

    def has_starved(self, philosopher: Philosopher) -> bool:
        """True if the philosopher went too long without eating."""
        with self.meal_lock:
            hungry_for = current_time_ms() - philosopher.last_meal
            return hungry_for >= philosopher.time_to_die and not philosopher.eating

    def meals_eaten(self, philosopher: Philosopher) -> int:
        """Number of meals the philosopher has started."""
        with self.meal_lock:
            return philosopher.meals_eaten