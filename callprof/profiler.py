"""Global call statistics, the profiling hook and the backend interface."""

from __future__ import annotations

import atexit
import sys
import threading
from abc import ABC, abstractmethod
from collections.abc import Hashable, Sequence
from dataclasses import dataclass
from typing import Any

from .clock import measure_ticks_per_second, read_timestamp
from .table import FuncStats

DEFAULT_CAPACITY = 4096


@dataclass(frozen=True)
class FuncStat:
    """Aggregated statistics of one function handed to a backend."""

    fn: Any
    call_count: int
    total_ticks: int


class Profiler(ABC):
    """Backend that consumes aggregated per-function statistics."""

    @abstractmethod
    def analyze(self, stats: Sequence[FuncStat]) -> None:
        """Process the statistics of all recorded functions."""

    @abstractmethod
    def name(self) -> str:
        """Human-readable name of this backend."""


_table: dict[Hashable, FuncStats] = {}
_ticks_per_sec: int | None = None
_DEFAULT_BACKEND = object()
_auto_flush_backend: Any = _DEFAULT_BACKEND
_OWN_FILE = __file__


def get_table() -> dict[Hashable, FuncStats]:
    """Return the live aggregation table keyed by function identity."""
    return _table


def get_ticks_per_sec() -> int:
    """Return the calibrated ticks per second, measuring it on first use."""
    global _ticks_per_sec
    if _ticks_per_sec is None:
        _ticks_per_sec = measure_ticks_per_second()
    return _ticks_per_sec


def func_enter(fn: Hashable) -> None:
    """Record entry into ``fn``."""
    stats = _table.get(fn)
    if stats is None:
        stats = _table[fn] = FuncStats()
    stats.enter(read_timestamp())


def func_exit(fn: Hashable) -> None:
    """Record exit from ``fn``; unknown functions are ignored."""
    now = read_timestamp()
    stats = _table.get(fn)
    if stats is not None:
        stats.exit(now)


def _hook(frame, event, arg) -> None:
    code = frame.f_code
    if code.co_filename == _OWN_FILE:
        return
    if event == "call":
        func_enter(code)
    elif event == "return":
        func_exit(code)


def enable_instrumentation() -> None:
    """Start recording Python function calls in this and newly started threads."""
    threading.setprofile(_hook)
    sys.setprofile(_hook)


def disable_instrumentation() -> None:
    """Stop recording Python function calls."""
    sys.setprofile(None)
    threading.setprofile(None)


def start_recording(max_unique_functions: int = DEFAULT_CAPACITY) -> None:
    """Clear the table before recording starts."""
    if max_unique_functions < 0:
        raise ValueError("max_unique_functions must not be negative")
    _table.clear()


def flush(profiler: Profiler) -> None:
    """Hand the aggregated statistics to ``profiler`` if any were recorded."""
    batch = [
        FuncStat(fn, stats.call_count, stats.total_ticks)
        for fn, stats in _table.items()
    ]
    if batch:
        profiler.analyze(batch)


def stop_recording() -> None:
    """Drop all recorded statistics."""
    _table.clear()


def set_auto_flush(profiler: Profiler | None) -> None:
    """Set the backend flushed at interpreter exit; ``None`` disables it."""
    global _auto_flush_backend
    _auto_flush_backend = profiler


def _auto_flush() -> None:
    backend = _auto_flush_backend
    if backend is None or not _table:
        return
    if backend is _DEFAULT_BACKEND:
        from .print_profiler import PrintProfiler

        backend = PrintProfiler()
    flush(backend)


atexit.register(_auto_flush)