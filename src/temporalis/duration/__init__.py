"""
temporalis.duration
~~~~~~~~~~~~~~~~~~~

Human-readable rendering of elapsed time.

Basic usage::

    from datetime import timedelta
    from temporalis.duration import format_duration

    format_duration(timedelta(hours=27))   # → '1 day and 3 hours'
    format_duration(90)                    # → '1 minute and 30 seconds'

``timedelta``, ``numpy.timedelta64`` and plain numbers of seconds are all
accepted.

Public API
----------
format_duration   Natural-language text for a non-negative duration.
to_seconds        Whole seconds in a duration, truncated toward zero.
pluralize         "" for 1, "s" for anything else.
DurationError     Raised for negative or non-finite durations.
"""

from __future__ import annotations

from temporalis.duration._exceptions import DurationError
from temporalis.duration.format import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    format_duration,
    pluralize,
    to_seconds,
)

__all__ = [
    "DurationError",
    "SECONDS_PER_DAY",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_MINUTE",
    "format_duration",
    "pluralize",
    "to_seconds",
]
