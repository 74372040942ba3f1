"""What each philosopher does: take forks, eat, sleep and think, until the run ends."""

from __future__ import annotations

from philo.clock import precise_sleep
from philo.table import Philosopher, Table

TAKEN_FORK = "has taken a fork"
EATING = "is eating"
SLEEPING = "is sleeping"
THINKING = "is thinking"


def eat(table: Table, philosopher: Philosopher) -> None:
    """Pick up both forks, eat, then put the forks back.

    A philosopher alone at the table has only one fork: he holds it until
    he starves and then puts it down without eating.
    """
    with philosopher.right_fork:
        table.print_status(philosopher, TAKEN_FORK)
        if table.settings.number_of_philosophers == 1:
            precise_sleep(philosopher.time_to_die)
            return
        with philosopher.left_fork:
            table.print_status(philosopher, TAKEN_FORK)
            philosopher.eating = True
            table.print_status(philosopher, EATING)
            table.record_meal(philosopher)
            precise_sleep(philosopher.time_to_eat)
            philosopher.eating = False


def sleep(table: Table, philosopher: Philosopher) -> None:
    """Announce sleeping and sleep for the philosopher's sleep time."""
    table.print_status(philosopher, SLEEPING)
    precise_sleep(philosopher.time_to_sleep)


def think(table: Table, philosopher: Philosopher) -> None:
    """Announce thinking."""
    table.print_status(philosopher, THINKING)


def philosopher_routine(table: Table, philosopher: Philosopher) -> None:
    """Repeat eat, sleep, think until the table reports the run finished."""
    if philosopher.id % 2 == 0:
        precise_sleep(1)
    while not table.is_finished():
        eat(table, philosopher)
        sleep(table, philosopher)
        think(table, philosopher)