import time

from philo.clock import current_time_ms, precise_sleep


def test_current_time_matches_wall_clock():
    before = int(time.time() * 1000)
    now = current_time_ms()
    after = int(time.time() * 1000)
    assert before - 1 <= now <= after + 1


def test_current_time_does_not_go_backwards():
    first = current_time_ms()
    second = current_time_ms()
    assert second >= first


def test_precise_sleep_waits_at_least_requested():
    start = current_time_ms()
    precise_sleep(20)
    assert current_time_ms() - start >= 20


def test_precise_sleep_zero_returns_quickly():
    start = current_time_ms()
    precise_sleep(0)
    elapsed = current_time_ms() - start
    assert 0 <= elapsed < 50