import time

from callprof.clock import measure_ticks_per_second, read_timestamp


def test_read_timestamp_is_non_decreasing():
    samples = [read_timestamp() for _ in range(100)]
    assert samples == sorted(samples)


def test_read_timestamp_advances_over_time():
    start = read_timestamp()
    time.sleep(0.002)
    assert read_timestamp() > start


def test_measure_ticks_per_second_is_plausible():
    tps = measure_ticks_per_second()
    # The counter counts nanoseconds, so it should be close to one billion.
    assert 500_000_000 < tps < 2_000_000_000


def test_measure_ticks_per_second_spins_at_least_five_ms():
    start_ticks = read_timestamp()
    start = time.monotonic_ns()
    tps = measure_ticks_per_second()
    elapsed_ns = time.monotonic_ns() - start
    elapsed_ticks = read_timestamp() - start_ticks
    assert elapsed_ns >= 5_000_000
    assert tps > 0
    # The calibration spin must account for at least five milliseconds of ticks.
    assert elapsed_ticks >= tps * 5 // 1000 - tps // 1000