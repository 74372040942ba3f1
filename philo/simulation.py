"""Running a whole simulation, and the command that starts one."""

from __future__ import annotations

import sys
import threading
from typing import Sequence, TextIO

from philo.monitor import monitor
from philo.parsing import ArgumentError, Settings, parse_settings
from philo.routine import philosopher_routine
from philo.table import Table

# Exit status the command reports on bad arguments (-1 as an 8-bit status).
EXIT_FAILURE = 255


def run(settings: Settings, out: TextIO | None = None) -> Table:
    """Run one simulation to its end and return the table it used."""
    table = Table(settings, out)
    watcher = threading.Thread(target=monitor, args=(table,), name="monitor")
    diners = [
        threading.Thread(
            target=philosopher_routine,
            args=(table, philosopher),
            name=f"philosopher-{philosopher.id}",
        )
        for philosopher in table.philosophers
    ]
    watcher.start()
    for diner in diners:
        diner.start()
    watcher.join()
    for diner in diners:
        diner.join()
    return table


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command-line arguments and run the simulation."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_settings(args)
    except ArgumentError as error:
        print(error, file=sys.stderr)
        return EXIT_FAILURE
    run(settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())