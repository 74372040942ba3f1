"""Command-line argument parsing and validation for the dining simulation."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import takewhile
from typing import Sequence

MAX_PHILOSOPHERS = 200

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


class ArgumentError(ValueError):
    """Raised when the command-line arguments are invalid."""


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation run; times are in milliseconds."""

    number_of_philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    must_eat: int | None = None


def _to_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def atoi(text: str) -> int:
    """Parse a leading integer the way C's atoi does, wrapping to 32 bits.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. Text with no digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    digits = "".join(takewhile(lambda ch: ch in _DIGITS, rest))
    value = int(digits) if digits else 0
    return _to_int32(sign * value)


def is_digits(text: str) -> bool:
    """Return True if every character is an ASCII digit (True for "")."""
    return all(ch in _DIGITS for ch in text)


def _positive(text: str, message: str) -> int:
    value = atoi(text)
    if value <= 0 or not is_digits(text):
        raise ArgumentError(message)
    return value


def parse_settings(args: Sequence[str]) -> Settings:
    """Validate the four or five arguments and build the run settings.

    The arguments are: number of philosophers, time to die, time to eat,
    time to sleep and, optionally, the number of meals each must eat.
    """
    args = list(args)
    if len(args) not in (4, 5):
        raise ArgumentError("Wrong argument count")

    count = atoi(args[0])
    if count > MAX_PHILOSOPHERS:
        raise ArgumentError("Exceeded Maximum Number of Philosophers")
    if count <= 0 or not is_digits(args[0]):
        raise ArgumentError("Invalid value for philosophers number")

    time_to_die = _positive(args[1], "Invalid value for time to die")
    time_to_eat = _positive(args[2], "Invalid value for time to eat")
    time_to_sleep = _positive(args[3], "Invalid value for time to sleep")

    must_eat = None
    if len(args) == 5:
        must_eat = atoi(args[4])
        if must_eat < 0 or not is_digits(args[4]):
            raise ArgumentError(
                "Invalid value for number of times each philosopher must eat"
            )

    return Settings(
        number_of_philosophers=count,
        time_to_die=time_to_die,
        time_to_eat=time_to_eat,
        time_to_sleep=time_to_sleep,
        must_eat=must_eat,
    )