"""Backend that prints a table of statistics sorted by total time."""

from __future__ import annotations

import sys
import types
from collections.abc import Sequence
from typing import Any, NamedTuple, TextIO

from .profiler import FuncStat, Profiler, get_ticks_per_sec

_MAX_NAME_COL = 60
_UNIT_SCALE = {"ns": 1.0, "µs": 1e3, "ms": 1e6, "s": 1e9}


class TimeValue(NamedTuple):
    value: float
    unit: str


def resolve_symbol(fn: Any) -> str:
    """Return a readable name for ``fn``, or an empty string if it has none."""
    if isinstance(fn, types.CodeType):
        return getattr(fn, "co_qualname", fn.co_name)
    name = getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None)
    return name if isinstance(name, str) else ""


def ticks_to_time(ticks: int, ticks_per_sec: int) -> TimeValue:
    """Convert ticks to a value in the most fitting unit of ns, µs, ms or s."""
    if ticks_per_sec == 0:
        return TimeValue(0.0, "ns")
    ns = ticks * 1e9 / ticks_per_sec
    for unit, limit in (("ns", 1e3), ("µs", 1e6), ("ms", 1e9)):
        if ns < limit:
            return TimeValue(ns / _UNIT_SCALE[unit], unit)
    return TimeValue(ns / 1e9, "s")


class PrintProfiler(Profiler):
    """Print statistics to a text stream, hottest functions first."""

    def __init__(self, out: TextIO | None = None, *, ticks_per_sec: int | None = None):
        self._out = out
        self._ticks_per_sec = ticks_per_sec

    def analyze(self, stats: Sequence[FuncStat]) -> None:
        out = self._out if self._out is not None else sys.stdout
        ordered = sorted(stats, key=lambda s: s.total_ticks, reverse=True)
        tps = self._ticks_per_sec if self._ticks_per_sec is not None else get_ticks_per_sec()

        unit = "ns"
        if ordered and tps > 0:
            unit = ticks_to_time(ordered[0].total_ticks, tps).unit

        names = [resolve_symbol(s.fn) for s in ordered]
        name_col = min(max([len("function"), *map(len, names)]), _MAX_NAME_COL)

        def line(address, name, calls, ticks, time_text):
            return f"{address:<18}  {name:<{name_col}}  {calls:>10}  {ticks:>16}  {time_text:>16}"

        print(line("address", "function", "calls", "total ticks", f"time ({unit})"), file=out)
        print(line("-" * 18, "-" * name_col, "-" * 10, "-" * 16, "-" * 16), file=out)

        for s, raw in zip(ordered, names):
            if not raw:
                display = "?"
            elif len(raw) <= name_col:
                display = raw
            else:
                display = raw[: name_col - 1] + "…"
            time_val = 0.0
            if tps > 0:
                time_val = s.total_ticks * 1e9 / tps / _UNIT_SCALE[unit]
            print(
                f"{hex(id(s.fn)):>18}  {display:<{name_col}}  {s.call_count:>10}  "
                f"{s.total_ticks:>16}  {time_val:>16.3f}",
                file=out,
            )

    def name(self) -> str:
        return "PrintProfiler"