import threading
import time
from datetime import datetime, timedelta

from barblocks.sleeper import SleeperThread


def test_loop_runs_function_repeatedly_until_stopped():
    calls = []
    done = threading.Event()
    sleeper = SleeperThread()

    def work():
        calls.append(1)
        if len(calls) >= 3:
            done.set()
        sleeper.sleep_for(0.01)

    sleeper.start(work)
    assert done.wait(2)
    sleeper.stop()
    sleeper.join(2)
    assert len(calls) >= 3
    assert sleeper.is_running() is False


def test_sleep_for_times_out_without_signal():
    sleeper = SleeperThread()
    start = time.monotonic()
    assert sleeper.sleep_for(0.02) is False
    assert time.monotonic() - start >= 0.015


def test_sleep_for_accepts_timedelta():
    sleeper = SleeperThread()
    assert sleeper.sleep_for(timedelta(milliseconds=10)) is False


def test_wake_up_interrupts_sleep():
    sleeper = SleeperThread()
    timer = threading.Timer(0.05, sleeper.wake_up)
    timer.start()
    start = time.monotonic()
    assert sleeper.sleep_for(5) is True
    assert time.monotonic() - start < 4
    timer.join()


def test_after_stop_sleep_returns_immediately():
    sleeper = SleeperThread()
    sleeper.stop()
    start = time.monotonic()
    assert sleeper.sleep_for(5) is True
    assert time.monotonic() - start < 1
    assert sleeper.is_running() is False


def test_sleep_until_past_deadline_returns_false():
    sleeper = SleeperThread()
    assert sleeper.sleep_until(time.time() - 1) is False


def test_sleep_until_datetime_woken():
    sleeper = SleeperThread()
    timer = threading.Timer(0.05, sleeper.wake_up)
    timer.start()
    assert sleeper.sleep_until(datetime.now() + timedelta(seconds=5)) is True
    timer.join()


def test_context_manager_stops_loop():
    ran = threading.Event()

    def work():
        ran.set()
        sleeper.sleep_for(1)

    with SleeperThread() as sleeper:
        sleeper.start(work)
        assert ran.wait(2)
    assert sleeper.is_running() is False