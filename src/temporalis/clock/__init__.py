"""
temporalis.clock
~~~~~~~~~~~~~~~~

Thin layer over the standard library's clock, timers, parsing and zone
database.

Basic usage::

    from datetime import timedelta
    from temporalis.clock import after, convert_timezone, now

    fired_at = after(timedelta(milliseconds=50)).get()
    convert_timezone(now(), "UTC", "Europe/Amsterdam")

Timers and tickers deliver times on ``queue.Queue`` objects, or call a
function in their own thread (:func:`after_func`).  Durations may be
``timedelta``, ``numpy.timedelta64`` or seconds as a number.

Public API
----------
now, sleep                       Host clock.
Timer, new_timer, after,
after_func                       One-shot timers.
Ticker, new_ticker, tick         Periodic ticks.
format_time, parse, parse_time,
parse_in_location                strftime/strptime wrappers.
DEFAULT_LAYOUT                   "%Y-%m-%d %H:%M:%S".
load_location, local_zone,
convert_timezone, instant        Zone lookup and conversion.
TimezoneError                    Unknown zone name.
"""

from __future__ import annotations

from temporalis.clock.clock import (
    Ticker,
    Timer,
    after,
    after_func,
    new_ticker,
    new_timer,
    now,
    sleep,
    tick,
)
from temporalis.clock.layout import (
    DEFAULT_LAYOUT,
    format_time,
    parse,
    parse_in_location,
    parse_time,
)
from temporalis.clock.zone import (
    TimezoneError,
    convert_timezone,
    instant,
    load_location,
    local_zone,
)

__all__ = [
    "Ticker",
    "Timer",
    "after",
    "after_func",
    "new_ticker",
    "new_timer",
    "now",
    "sleep",
    "tick",
    "DEFAULT_LAYOUT",
    "format_time",
    "parse",
    "parse_in_location",
    "parse_time",
    "TimezoneError",
    "convert_timezone",
    "instant",
    "load_location",
    "local_zone",
]
