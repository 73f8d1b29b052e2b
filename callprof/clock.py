"""Monotonic timestamp counter and its calibration against the system clock."""

from __future__ import annotations

import time

_SPIN_NS = 5_000_000
_NS_PER_SEC = 1_000_000_000


def read_timestamp() -> int:
    """Return the current value of the high-resolution timestamp counter."""
    return time.perf_counter_ns()


def measure_ticks_per_second() -> int:
    """Measure counter ticks per second over a ~5 ms busy-wait.

    Returns 0 when no time could be observed to pass.
    """
    t0 = time.monotonic_ns()
    c0 = read_timestamp()
    while True:
        t1 = time.monotonic_ns()
        if t1 - t0 >= _SPIN_NS:
            break
    c1 = read_timestamp()

    elapsed_ns = t1 - t0
    if elapsed_ns <= 0:
        return 0
    return (c1 - c0) * _NS_PER_SEC // elapsed_ns