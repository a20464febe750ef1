"""A worker thread that repeatedly runs a function and can sleep interruptibly."""

from __future__ import annotations

import threading
import time
from datetime import datetime, timedelta
from typing import Callable


def _seconds(value: float | timedelta) -> float:
    if isinstance(value, timedelta):
        return value.total_seconds()
    return float(value)


class SleeperThread:
    """Runs ``func`` in a loop on a daemon thread until stopped.

    ``func`` usually ends with a call to :meth:`sleep_for` or :meth:`sleep_until`,
    which return early when :meth:`wake_up` or :meth:`stop` is called.
    """

    def __init__(self, func: Callable[[], None] | None = None) -> None:
        self._cond = threading.Condition()
        self._do_run = True
        self._signal = False
        self._thread: threading.Thread | None = None
        if func is not None:
            self.start(func)

    def start(self, func: Callable[[], None]) -> "SleeperThread":
        """Start a new worker thread that loops over ``func``."""
        self._thread = threading.Thread(target=self._loop, args=(func,), daemon=True)
        self._thread.start()
        return self

    def _loop(self, func: Callable[[], None]) -> None:
        while self._do_run:
            with self._cond:
                self._signal = False
            func()

    def is_running(self) -> bool:
        return self._do_run

    def _wait(self, timeout: float) -> bool:
        with self._cond:
            return self._cond.wait_for(
                lambda: self._signal or not self._do_run, timeout=max(timeout, 0.0)
            )

    def sleep_for(self, duration: float | timedelta) -> bool:
        """Sleep for ``duration`` seconds; return True if woken early."""
        return self._wait(_seconds(duration))

    def sleep_until(self, deadline: float | datetime) -> bool:
        """Sleep until an epoch time or datetime; return True if woken early."""
        if isinstance(deadline, datetime):
            deadline = deadline.timestamp()
        return self._wait(float(deadline) - time.time())

    def wake_up(self) -> None:
        with self._cond:
            self._signal = True
            self._cond.notify_all()

    def stop(self) -> None:
        """Ask the loop to end and wake any sleeper."""
        with self._cond:
            self._signal = True
            self._do_run = False
            self._cond.notify_all()

    def join(self, timeout: float | None = None) -> None:
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)

    def __enter__(self) -> "SleeperThread":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()
        self.join(1.0)