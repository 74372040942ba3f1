"""The watcher that ends a run when someone starves or everyone has eaten."""

from __future__ import annotations

import time

from philo.table import Table

DIED = "died"


def check_deaths(table: Table) -> bool:
    """Stop the run if any philosopher has starved; return True if so."""
    for philosopher in table.philosophers:
        if table.has_starved(philosopher):
            table.print_status(philosopher, DIED)
            table.stop()
            return True
    return False


def all_ate_enough(table: Table) -> bool:
    """True if a meal goal is set and every philosopher has reached it."""
    goal = table.settings.must_eat
    if goal is None:
        return False
    return all(table.meals_eaten(p) >= goal for p in table.philosophers)


def check_meals(table: Table) -> bool:
    """Stop the run and announce success once everyone has eaten enough."""
    if not all_ate_enough(table):
        return False
    table.stop()
    with table.write_lock:
        print(
            "\n\033[0;32m✓ SIMULATION SUCCESSFUL:"
            f"All philosophers ate {table.settings.must_eat} times!\033[0m",
            file=table.out,
            flush=True,
        )
    return True


def monitor(table: Table) -> None:
    """Watch the table until a death or until every meal goal is met."""
    while not (check_deaths(table) or check_meals(table)):
        # Yield to the philosopher threads between checks.
        time.sleep(0)