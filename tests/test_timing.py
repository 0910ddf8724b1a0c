import time

from dining.timing import now_ms, precise_sleep


def test_now_ms_matches_wall_clock():
    reference = time.time() * 1000
    assert abs(now_ms() - reference) < 1000


def test_now_ms_does_not_go_backwards():
    first = now_ms()
    second = now_ms()
    assert second >= first


def test_precise_sleep_waits_at_least_requested():
    start = now_ms()
    precise_sleep(20)
    assert now_ms() - start >= 20


def test_precise_sleep_zero_returns_promptly():
    start = now_ms()
    precise_sleep(0)
    assert now_ms() - start < 100