"""Instrumented example programs: Fibonacci, sorting, matrices and text processing."""

from __future__ import annotations

import argparse
import heapq
import sys
from collections import Counter
from collections.abc import Iterable, Iterator, Mapping, Sequence
from contextlib import contextmanager
from operator import itemgetter

from .profiler import disable_instrumentation, enable_instrumentation
from .workload import (
    Matrix,
    _xorshift32,
    bubble_sort,
    fib,
    merge_sort,
    naive_multiply,
    xorshift_data,
)

EXAMPLE_FIB_N = 20
BASIC_FIB_RANGE = range(10, 36, 5)
SORTING_N = 8000
MATRIX_N = 200
STRINGS_LINES = 2000
STRINGS_WORDS_PER_LINE = 20
STRINGS_TOP_N = 10

_LINES_SEED = 0xCAFEBABE


@contextmanager
def _instrumented() -> Iterator[None]:
    enable_instrumentation()
    try:
        yield
    finally:
        disable_instrumentation()


def _parse(argv: Sequence[str] | None, description: str) -> None:
    argparse.ArgumentParser(description=description).parse_args(argv)


def make_matrix(n: int, fill: float) -> Matrix:
    """Return an n×n matrix with every element set to ``fill``."""
    return [[fill] * n for _ in range(n)]


def transpose(m: Matrix) -> Matrix:
    """Return the transpose of a square matrix."""
    return [list(column) for column in zip(*m)]


def transposed_multiply(a: Matrix, b: Matrix) -> Matrix:
    """Multiply square matrices, transposing ``b`` first for row-wise access."""
    bt = transpose(b)
    return [[sum((x * y for x, y in zip(row, col)), 0.0) for col in bt] for row in a]


def generate_word(state: int) -> tuple[str, int]:
    """Generate a pseudo-random word of 3–10 letters; return it and the next state."""
    state = _xorshift32(state)
    length = 3 + state % 8
    letters = []
    s2 = state
    for _ in range(length):
        s2 = _xorshift32(s2)
        letters.append(chr(ord("a") + s2 % 26))
    return "".join(letters), state


def generate_lines(num_lines: int, words_per_line: int) -> list[str]:
    """Generate a deterministic corpus of space-separated pseudo-random words."""
    state = _LINES_SEED
    lines = []
    for _ in range(num_lines):
        words = []
        for _ in range(words_per_line):
            word, state = generate_word(state)
            words.append(word)
        lines.append(" ".join(words))
    return lines


def tokenise(line: str) -> list[str]:
    """Split ``line`` on single spaces; a trailing space yields no empty token."""
    tokens = line.split(" ")
    if tokens[-1] == "":
        tokens.pop()
    return tokens


def count_frequencies(lines: Iterable[str]) -> Counter[str]:
    """Count how often each word occurs across ``lines``."""
    freq: Counter[str] = Counter()
    for line in lines:
        freq.update(tokenise(line))
    return freq


def top_n(freq: Mapping[str, int], n: int) -> list[tuple[str, int]]:
    """Return the ``n`` most frequent (word, count) pairs, most frequent first."""
    if n < 0:
        raise ValueError("n must not be negative")
    return heapq.nlargest(n, freq.items(), key=itemgetter(1))


def example_main(argv: Sequence[str] | None = None) -> int:
    """Profile a recursive Fibonacci; the report is printed at exit."""
    _parse(argv, "Profile a recursive Fibonacci.")
    with _instrumented():
        fib(EXAMPLE_FIB_N)
    return 0


def basic_main(argv: Sequence[str] | None = None) -> int:
    """Print a series of Fibonacci numbers computed recursively."""
    _parse(argv, "Recursive Fibonacci example.")
    with _instrumented():
        for i in BASIC_FIB_RANGE:
            print(f"Fib({i:2d}) = {fib(i)}")
    return 0


def sorting_main(argv: Sequence[str] | None = None) -> int:
    """Sort the same data three ways and check that the results agree."""
    _parse(argv, "Sorting algorithm comparison.")
    with _instrumented():
        data = xorshift_data(SORTING_N)
        d1 = list(data)
        bubble_sort(d1)
        d2 = list(data)
        merge_sort(d2, 0, SORTING_N - 1)
        d3 = sorted(data)

    if d1 != d2 or d2 != d3:
        print("Sort results differ!", file=sys.stderr)
        return 1
    print(f"All three sorts produced identical results for {SORTING_N} elements.")
    return 0


def matrix_main(argv: Sequence[str] | None = None) -> int:
    """Compare naive and transposed matrix multiplication."""
    _parse(argv, "Matrix multiplication: naive vs cache-friendly.")
    n = MATRIX_N
    with _instrumented():
        a = make_matrix(n, 1.0)
        b = make_matrix(n, 2.0)
        c1 = naive_multiply(a, b)
        c2 = transposed_multiply(a, b)

    expected = float(n) * 2.0
    ok = all(
        x == y == expected for row1, row2 in zip(c1, c2) for x, y in zip(row1, row2)
    )
    print(f"Matrix multiply {n}x{n}: results {'match' if ok else 'DIFFER'}")
    return 0 if ok else 1


def strings_main(argv: Sequence[str] | None = None) -> int:
    """Run the text pipeline and print the most frequent words."""
    _parse(argv, "String processing pipeline.")
    with _instrumented():
        lines = generate_lines(STRINGS_LINES, STRINGS_WORDS_PER_LINE)
        freq = count_frequencies(lines)
        top = top_n(freq, STRINGS_TOP_N)

    print(
        f"Top {STRINGS_TOP_N} words across {STRINGS_LINES} lines "
        f"({STRINGS_WORDS_PER_LINE} words each):"
    )
    for rank, (word, count) in enumerate(top, start=1):
        print(f"  {rank:2d}. {word:<12} {count}")
    return 0