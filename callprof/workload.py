"""Shared benchmark workload: recursive Fibonacci, two sorts and a matrix multiply."""

from __future__ import annotations

import argparse
import heapq
import time
from collections.abc import Sequence

Matrix = list[list[float]]

FIB_N = 30
SORT_N = 5000
MAT_N = 150
LOOP_SECONDS = 10

_SEED = 0xDEADBEEF
_MASK32 = 0xFFFFFFFF


def _xorshift32(state: int) -> int:
    """Advance a 32-bit xorshift generator by one step."""
    state ^= (state << 13) & _MASK32
    state ^= state >> 17
    state ^= (state << 5) & _MASK32
    return state & _MASK32


def fib(n: int) -> int:
    """Return the n-th Fibonacci number, computed by naive recursion."""
    if n <= 1:
        return n
    return fib(n - 1) + fib(n - 2)


def bubble_sort(values: list[int]) -> None:
    """Sort ``values`` in place with bubble sort."""
    n = len(values)
    for i in range(n):
        for j in range(n - i - 1):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]


def _merge(values: list[int], lo: int, mid: int, hi: int) -> None:
    left = values[lo : mid + 1]
    right = values[mid + 1 : hi + 1]
    values[lo : hi + 1] = heapq.merge(left, right)


def merge_sort(values: list[int], lo: int, hi: int) -> None:
    """Sort ``values[lo..hi]`` (both inclusive) in place with merge sort."""
    if lo >= hi:
        return
    mid = lo + (hi - lo) // 2
    merge_sort(values, lo, mid)
    merge_sort(values, mid + 1, hi)
    _merge(values, lo, mid, hi)


def naive_multiply(a: Matrix, b: Matrix) -> Matrix:
    """Multiply two square matrices with the textbook triple loop."""
    n = len(a)
    return [
        [sum((a[i][k] * b[k][j] for k in range(n)), 0.0) for j in range(n)]
        for i in range(n)
    ]


def xorshift_data(n: int) -> list[int]:
    """Return ``n`` deterministic pseudo-random non-negative integers."""
    data = []
    state = _SEED
    for _ in range(n):
        state = _xorshift32(state)
        data.append(state & 0x7FFFFFFF)
    return data


def run_workload() -> str:
    """Run all three workloads, print a one-line summary and return it."""
    fib_value = fib(FIB_N)

    data = xorshift_data(SORT_N)
    bubble_data = list(data)
    bubble_sort(bubble_data)
    merge_data = list(data)
    merge_sort(merge_data, 0, SORT_N - 1)

    a = [[1.0] * MAT_N for _ in range(MAT_N)]
    b = [[2.0] * MAT_N for _ in range(MAT_N)]
    c = naive_multiply(a, b)

    verdict = "ok" if bubble_data == merge_data else "FAIL"
    line = f"Fib({FIB_N})={fib_value}  sorted={verdict}  C[0][0]={c[0][0]:.0f}"
    print(line)
    return line


def main(argv: Sequence[str] | None = None) -> int:
    """Run the workload once."""
    argparse.ArgumentParser(description="Run the benchmark workload once.").parse_args(argv)
    run_workload()
    return 0


def main_loop(argv: Sequence[str] | None = None) -> int:
    """Run the workload repeatedly for about ``LOOP_SECONDS`` seconds."""
    argparse.ArgumentParser(
        description="Run the benchmark workload repeatedly for a fixed time."
    ).parse_args(argv)
    deadline = time.monotonic() + LOOP_SECONDS
    iterations = 0
    while time.monotonic() < deadline:
        run_workload()
        iterations += 1
    print(f"Completed {iterations} iterations in ~{LOOP_SECONDS} s")
    return 0