import logging
import queue
import threading
import time
from datetime import datetime, timedelta
from typing import Callable, Optional, Union

import numpy as np

from .zone import ZoneLike, as_tzinfo

logger = logging.getLogger(__name__)

Interval = Union[timedelta, np.timedelta64, float]


def _seconds(duration: Interval) -> float:
    if isinstance(duration, timedelta):
        return duration.total_seconds()
    if isinstance(duration, np.timedelta64):
        return float(duration / np.timedelta64(1, "s"))
    return float(duration)


def now(tz: Optional[ZoneLike] = None) -> datetime:
    """Current time, aware.  Defaults to the host's local zone."""
    if tz is None:
        return datetime.now().astimezone()
    return datetime.now(as_tzinfo(tz))


def sleep(duration: Interval) -> None:
    # Non-positive durations return at once.
    time.sleep(max(_seconds(duration), 0.0))


class Timer:
    """
    One-shot timer.

    Without a callback the fire time is put on ``c``, a queue holding at most
    one value.  With a callback, ``func()`` runs in the timer's own thread
    and ``c`` is ``None``.
    """

    def __init__(self, duration: Interval, func: Optional[Callable[[], None]] = None) -> None:
        self._func = func
        self.c: Optional["queue.Queue[datetime]"] = None if func is not None else queue.Queue(maxsize=1)
        self._lock = threading.Lock()
        self._thread: Optional[threading.Timer] = None
        self._active = False
        self._start(duration)

    def _start(self, duration: Interval) -> None:
        thread = threading.Timer(max(_seconds(duration), 0.0), self._fire)
        thread.daemon = True
        self._thread = thread
        self._active = True
        thread.start()

    def _fire(self) -> None:
        with self._lock:
            # A reset replaces the thread; stale ones must not deliver.
            if not self._active or self._thread is not threading.current_thread():
                return
            self._active = False
        if self._func is not None:
            self._func()
            return
        try:
            self.c.put_nowait(now())
        except queue.Full:
            pass

    def stop(self) -> bool:
        """Prevent the timer from firing.  False if it already fired or was stopped."""
        with self._lock:
            was_active = self._active
            self._active = False
            self._thread.cancel()
        return was_active

    def reset(self, duration: Interval) -> bool:
        """Rearm the timer to fire after ``duration``.  Returns what :meth:`stop` would."""
        with self._lock:
            was_active = self._active
            self._thread.cancel()
            self._start(duration)
        logger.debug("timer reset to %s (was active: %s)", duration, was_active)
        return was_active

    def __repr__(self) -> str:
        return f"Timer(active={self._active}, callback={self._func is not None})"


def new_timer(duration: Interval) -> Timer:
    return Timer(duration)


def after(duration: Interval) -> "queue.Queue[datetime]":
    """Queue that receives the current time once ``duration`` has passed."""
    return Timer(duration).c


def after_func(duration: Interval, func: Callable[[], None]) -> Timer:
    return Timer(duration, func)


class Ticker:
    """
    Puts the current time on ``c`` every period until stopped.

    ``c`` holds at most one tick; ticks a slow reader misses are dropped
    rather than queued.
    """

    def __init__(self, duration: Interval) -> None:
        self.c: "queue.Queue[datetime]" = queue.Queue(maxsize=1)
        self._lock = threading.Lock()
        self._stopped = threading.Event()
        self._period = 0.0
        self._start(duration)

    @staticmethod
    def _period_of(duration: Interval) -> float:
        period = _seconds(duration)
        if period <= 0.0:
            raise ValueError(f"Ticker period must be positive; got {duration}.")
        return period

    def _start(self, duration: Interval) -> None:
        self._period = self._period_of(duration)
        self._stopped = threading.Event()
        thread = threading.Thread(
            target=self._run,
            args=(self._period, self._stopped),
            name="temporalis-ticker",
            daemon=True,
        )
        thread.start()

    def _run(self, period: float, stopped: threading.Event) -> None:
        deadline = time.monotonic() + period
        while not stopped.wait(max(deadline - time.monotonic(), 0.0)):
            try:
                self.c.put_nowait(now())
            except queue.Full:
                pass
            deadline += period
            current = time.monotonic()
            if deadline < current:
                # fell behind; skip the missed ticks
                deadline = current + period

    def stop(self) -> None:
        with self._lock:
            self._stopped.set()

    def reset(self, duration: Interval) -> None:
        self._period_of(duration)
        with self._lock:
            self._stopped.set()
            self._start(duration)

    @property
    def period(self) -> float:
        return self._period

    def __repr__(self) -> str:
        return f"Ticker(period={self._period}, stopped={self._stopped.is_set()})"


def new_ticker(duration: Interval) -> Ticker:
    return Ticker(duration)


def tick(duration: Interval) -> Optional["queue.Queue[datetime]"]:
    """Queue of ticks from a ticker nobody can stop.  None for a non-positive period."""
    if _seconds(duration) <= 0.0:
        return None
    return Ticker(duration).c
