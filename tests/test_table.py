from callprof.table import FuncStats


def test_new_stats_are_empty():
    stats = FuncStats()
    assert stats.call_count == 0
    assert stats.total_ticks == 0
    assert stats.depth == 0


def test_enter_exit_accumulates_duration():
    stats = FuncStats()
    stats.enter(100)
    stats.exit(130)
    assert stats.call_count == 1
    assert stats.total_ticks == 30
    assert stats.depth == 0


def test_nested_calls_pair_innermost_first():
    stats = FuncStats()
    stats.enter(10)
    stats.enter(20)
    stats.exit(25)
    assert stats.depth == 1
    stats.exit(40)
    assert stats.total_ticks == (25 - 20) + (40 - 10)
    assert stats.call_count == 2


def test_exit_without_enter_is_ignored():
    stats = FuncStats()
    stats.exit(1000)
    assert stats.total_ticks == 0
    assert stats.call_count == 0


def test_depth_is_capped_but_calls_still_counted():
    stats = FuncStats()
    calls = FuncStats.MAX_DEPTH + 44
    for t in range(calls):
        stats.enter(t)
    assert stats.call_count == calls
    assert stats.depth == FuncStats.MAX_DEPTH
    for _ in range(calls):
        stats.exit(1000)
    assert stats.depth == 0
    assert stats.total_ticks == sum(1000 - t for t in range(FuncStats.MAX_DEPTH))


def test_depth_stops_at_256_nested_entries():
    stats = FuncStats()
    for t in range(300):
        stats.enter(t)
    assert stats.depth == 256
    assert stats.call_count == 300