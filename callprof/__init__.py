"""Instrumenting profiler that counts calls and sums time per Python function, with demo workloads."""

__version__ = "0.1.0"