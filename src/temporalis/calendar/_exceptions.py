from __future__ import annotations

from typing import Any


class CalendarError(Exception):
    """Base exception for all calendar-related errors."""


class InvalidRange(CalendarError, ValueError):
    """The end of a date range precedes its start."""

    def __init__(self, start: Any, end: Any) -> None:
        self.start = start
        self.end = end
        super().__init__(f"End {end!r} precedes start {start!r}.")
