# callprof

A small instrumenting profiler for Python code. While instrumentation is on,
every call of a Python function is counted and the time spent inside each
function is summed. When the interpreter exits, a table sorted by total time
(hottest function first) is printed to standard output.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Using it in your code

```python
from callprof.profiler import enable_instrumentation, flush
from callprof.print_profiler import PrintProfiler

enable_instrumentation()

def fib(n):
    return n if n <= 1 else fib(n - 1) + fib(n - 2)

fib(20)

# Print the report now; the same statistics are also printed at exit.
flush(PrintProfiler())
```

`enable_instrumentation()` installs a profiling hook for the current thread
and for threads started afterwards; `disable_instrumentation()` removes it.
Only Python function calls and returns are recorded (built-in functions
implemented in C are not), and functions are identified by their code objects.

The report has one row per function: an address, the function's qualified
name, the number of calls, the total ticks and the total time in a single
unit (ns, µs, ms or s) chosen from the hottest row. Names longer than 60
characters are cut short with "…". `PrintProfiler` writes to standard output
by default; pass a text stream as `out` to write elsewhere, and
`ticks_per_sec=` to use a fixed tick rate instead of the calibrated one.

Other controls in `callprof.profiler`:

- `start_recording(max_unique_functions=4096)` clears the collected
  statistics; a negative count raises `ValueError`.
- `stop_recording()` discards everything recorded so far.
- `flush(profiler)` hands the current statistics to a backend. It does not
  clear them, and does nothing when nothing was recorded.
- `set_auto_flush(profiler)` chooses the backend used at exit; pass `None` to
  turn the automatic report off.
- `get_table()` returns the live table of per-function `FuncStats`, and
  `get_ticks_per_sec()` the calibrated tick rate (see `callprof.clock`).

`callprof.print_profiler` also offers `resolve_symbol(fn)` and
`ticks_to_time(ticks, ticks_per_sec)` for writing your own reports.

### Writing your own backend

Subclass `Profiler` and implement `analyze(stats)` and `name()`. `analyze`
receives a sequence of `FuncStat` records, one for each function seen, each
carrying the function (`fn`), its `call_count` and its `total_ticks`.

```python
from callprof.profiler import Profiler, flush

class CallCounter(Profiler):
    def analyze(self, stats):
        self.total_calls = sum(s.call_count for s in stats)

    def name(self):
        return "CallCounter"

counter = CallCounter()
flush(counter)
```

## Demonstration commands

These run a small workload with instrumentation on; the report is printed at
exit after the command's own output:

    callprof-example         # recursive Fibonacci(20)
    callprof-basic           # Fibonacci for 10, 15, ... 35
    callprof-sorting         # bubble sort, merge sort and built-in sort compared
    callprof-matrix          # naive versus transposed matrix multiply
    callprof-strings         # word frequency pipeline, top ten words

These run the benchmark workload (Fibonacci(30), bubble and merge sort of
5000 numbers, a 150×150 matrix multiply) without instrumentation and print a
one-line summary per run, for timing with an outside tool:

    callprof-workload        # the workload once
    callprof-workload-loop   # the workload repeated for about ten seconds

## What it does not do

callprof measures Python functions through the interpreter's profiling hook.
It does not instrument native extension code, sample call stacks, or build
call graphs; its only built-in report is the flat table described above.