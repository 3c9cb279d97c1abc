from __future__ import annotations

import math
from datetime import timedelta
from numbers import Integral, Real
from typing import NamedTuple, Union

import numpy as np

from ._exceptions import DurationError

DurationLike = Union[timedelta, np.timedelta64, Real]

# Fixed-length units; a "day" here is always 86400 s, whatever the calendar says.
SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR

_MICROSECOND = timedelta(microseconds=1)


class _Parts(NamedTuple):
    days: int
    hours: int
    minutes: int
    seconds: int


_UNITS = ("day", "hour", "minute", "second")


def pluralize(n: int) -> str:
    return "" if n == 1 else "s"


def _truncate_us(us: int) -> int:
    seconds = abs(us) // 1_000_000
    return seconds if us >= 0 else -seconds


def to_seconds(duration: DurationLike) -> int:
    """Whole seconds in ``duration``, truncated toward zero."""
    if isinstance(duration, timedelta):
        return _truncate_us(duration // _MICROSECOND)
    if isinstance(duration, np.timedelta64):
        if np.isnat(duration):
            raise DurationError("Duration is NaT.")
        return _truncate_us(int(duration.astype("timedelta64[us]").astype(np.int64)))
    if isinstance(duration, (bool, np.bool_)) or not isinstance(duration, Real):
        raise TypeError(f"Unsupported duration type {type(duration).__name__}.")
    if isinstance(duration, Integral):
        return int(duration)
    if not math.isfinite(duration):
        raise DurationError(f"Duration must be finite; got {duration}.")
    return int(duration)


def _is_negative(duration: DurationLike) -> bool:
    if isinstance(duration, timedelta):
        return duration < timedelta(0)
    if isinstance(duration, np.timedelta64):
        return bool(duration < np.timedelta64(0, "s"))
    return duration < 0


def _decompose(total: int) -> _Parts:
    days, rem = divmod(total, SECONDS_PER_DAY)
    hours, rem = divmod(rem, SECONDS_PER_HOUR)
    minutes, seconds = divmod(rem, SECONDS_PER_MINUTE)
    return _Parts(days, hours, minutes, seconds)


def format_duration(duration: DurationLike) -> str:
    """
    Render ``duration`` as English text, largest unit first.

    The duration is truncated to whole seconds and split into days, hours,
    minutes and seconds.  Zero parts are left out; the rest are joined with
    commas and a final "and"::

        format_duration(timedelta(hours=27))              # '1 day and 3 hours'
        format_duration(timedelta(days=2, seconds=11045)) # '2 days, 3 hours, 4 minutes and 5 seconds'
        format_duration(0)                                # '0 seconds'

    Plain numbers are read as seconds.  Negative durations raise
    :class:`DurationError`.
    """
    total = to_seconds(duration)
    if _is_negative(duration):
        raise DurationError(f"Duration must be non-negative; got {duration!r}.")

    tokens = [
        f"{n} {unit}{pluralize(n)}"
        for unit, n in zip(_UNITS, _decompose(total))
        if n
    ]
    if not tokens:
        return "0 seconds"
    if len(tokens) == 1:
        return tokens[0]
    return f"{', '.join(tokens[:-1])} and {tokens[-1]}"
