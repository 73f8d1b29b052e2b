import random

import pytest

from callprof import workload


@pytest.fixture
def small_workload(monkeypatch):
    monkeypatch.setattr(workload, "FIB_N", 10)
    monkeypatch.setattr(workload, "SORT_N", 60)
    monkeypatch.setattr(workload, "MAT_N", 4)


def test_fib_base_cases():
    assert workload.fib(0) == 0
    assert workload.fib(1) == 1
    assert workload.fib(-3) == -3


def test_fib_known_value():
    assert workload.fib(10) == 55


def test_fib_is_increasing():
    values = [workload.fib(n) for n in range(2, 15)]
    assert values == sorted(values)
    assert len(set(values)) == len(values)


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_bubble_sort_matches_sorted(seed):
    rng = random.Random(seed)
    values = [rng.randint(-100, 100) for _ in range(rng.randint(0, 40))]
    expected = sorted(values)
    workload.bubble_sort(values)
    assert values == expected


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_merge_sort_matches_sorted(seed):
    rng = random.Random(seed)
    values = [rng.randint(-100, 100) for _ in range(rng.randint(1, 40))]
    expected = sorted(values)
    workload.merge_sort(values, 0, len(values) - 1)
    assert values == expected


def test_merge_sort_only_touches_range():
    values = [9, 8, 7, 6, 5, 4, 3]
    workload.merge_sort(values, 2, 4)
    assert values[:2] == [9, 8]
    assert values[2:5] == [5, 6, 7]
    assert values[5:] == [4, 3]


def test_merge_sort_empty_range_is_noop():
    values = [3, 1, 2]
    workload.merge_sort(values, 0, -1)
    assert values == [3, 1, 2]


def test_naive_multiply_by_identity():
    rng = random.Random(7)
    a = [[rng.uniform(-5, 5) for _ in range(5)] for _ in range(5)]
    identity = [[1.0 if i == j else 0.0 for j in range(5)] for i in range(5)]
    assert workload.naive_multiply(a, identity) == a
    assert workload.naive_multiply(identity, a) == a


def test_naive_multiply_ones_by_twos():
    n = 6
    a = [[1.0] * n for _ in range(n)]
    b = [[2.0] * n for _ in range(n)]
    c = workload.naive_multiply(a, b)
    assert all(value == 2.0 * n for row in c for value in row)


def test_xorshift_data_deterministic_and_bounded():
    first = workload.xorshift_data(200)
    second = workload.xorshift_data(200)
    assert first == second
    assert len(first) == 200
    assert all(0 <= x < 2**31 for x in first)
    assert workload.xorshift_data(50) == first[:50]


def test_xorshift_data_empty():
    assert workload.xorshift_data(0) == []


def test_run_workload_summary(small_workload, capsys):
    line = workload.run_workload()
    assert line == f"Fib(10)={workload.fib(10)}  sorted=ok  C[0][0]=8"
    assert capsys.readouterr().out == line + "\n"


def test_main_returns_zero(small_workload, capsys):
    assert workload.main([]) == 0
    assert "sorted=ok" in capsys.readouterr().out


def test_main_loop_without_time_runs_nothing(monkeypatch, capsys):
    monkeypatch.setattr(workload, "LOOP_SECONDS", 0)
    assert workload.main_loop([]) == 0
    assert capsys.readouterr().out == "Completed 0 iterations in ~0 s\n"