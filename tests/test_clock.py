import time

from philosophers.clock import now_ms, sleep_ms


def test_now_ms_matches_wall_clock():
    reference = time.time() * 1000
    assert abs(now_ms() - reference) < 1000


def test_now_ms_never_goes_backwards():
    readings = [now_ms() for _ in range(100)]
    assert readings == sorted(readings)


def test_sleep_ms_waits_at_least_duration():
    start = now_ms()
    sleep_ms(20)
    assert now_ms() - start >= 20


def test_sleep_ms_zero_returns_promptly():
    start = now_ms()
    sleep_ms(0)
    elapsed = now_ms() - start
    assert 0 <= elapsed < 50