"""Millisecond wall-clock time and a busy-waiting sleep."""

from __future__ import annotations

import time


def current_time_ms() -> int:
    """Return the current wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def precise_sleep(ms: int) -> None:
    """Sleep for at least ``ms`` milliseconds, polling in short steps."""
    start = current_time_ms()
    while current_time_ms() - start < ms:
        time.sleep(0.0005)