import logging
from datetime import date, datetime, timedelta, timezone
from typing import Iterable, Optional, Union

import numpy as np

from ._exceptions import InvalidRange

logger = logging.getLogger(__name__)

Instant = Union[date, datetime]
HolidayLike = Union[date, datetime, np.datetime64]

# Mon..Sun; Saturday and Sunday are never working days.
WEEKMASK: str = "1111100"

_DAY = timedelta(days=1)
_HOUR = timedelta(hours=1)


# ── day conversion ───────────────────────────────────────────────────────

def _as_day(value: HolidayLike) -> np.datetime64:
    # Calendar date as seen in the value's own zone; time of day is dropped.
    if isinstance(value, datetime):
        value = value.date()
    return np.datetime64(value, "D")


def _holiday_days(holidays: Iterable[HolidayLike]) -> np.ndarray:
    return np.array([_as_day(h) for h in holidays], dtype="datetime64[D]")


def _advance(value: Instant, step: timedelta) -> Optional[Instant]:
    # None once the calendar runs out (past date.max / datetime.max).
    try:
        return value + step
    except OverflowError:
        return None


def _as_datetime(value: Instant) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, datetime.min.time())


def _count_busdays(days: Iterable[Instant], holidays: Iterable[HolidayLike]) -> int:
    arr = np.array([_as_day(d) for d in days], dtype="datetime64[D]")
    if arr.size == 0:
        return 0
    mask = np.is_busday(arr, weekmask=WEEKMASK, holidays=_holiday_days(holidays))
    return int(np.count_nonzero(mask))


# ── day classification ───────────────────────────────────────────────────

def is_working_day(day: Instant, holidays: Iterable[HolidayLike] = ()) -> bool:
    """
    True when ``day`` falls on Monday to Friday and its calendar date is not
    in ``holidays``.

    Holidays are matched on (year, month, day) only.  The date of an aware
    datetime is the date in its own zone, so holidays and the instant being
    classified must be expressed in the same zone.
    """
    return bool(
        np.is_busday(_as_day(day), weekmask=WEEKMASK, holidays=_holiday_days(holidays))
    )


# ── ranges ───────────────────────────────────────────────────────────────

def date_range(start: Instant, end: Instant) -> list:
    """
    Inclusive daily sequence from ``start`` to ``end``.

    Each element is one calendar day after the previous one, with the wall
    clock time of ``start`` preserved.  The sequence stops at the last
    element not after ``end``, and is empty when ``start`` is after ``end``.
    """
    dates = []
    d = start
    while d is not None and d <= end:
        dates.append(d)
        d = _advance(d, _DAY)
    return dates


def _elapsed(start: Instant, end: Instant) -> timedelta:
    if isinstance(start, datetime) and start.tzinfo is not None:
        # Same-tzinfo subtraction is wall clock; measure absolute time instead.
        return end.astimezone(timezone.utc) - start.astimezone(timezone.utc)
    return end - start


def date_diff(start: Instant, end: Instant) -> int:
    """
    Whole days between ``start`` and ``end``.

    This is elapsed time (whole hours divided by 24, truncated), not a count
    of calendar dates, so a span crossing a daylight saving transition may
    come out one lower than the number of dates in between.

    Raises :class:`InvalidRange` if ``end`` precedes ``start``.
    """
    if end < start:
        logger.debug("date_diff rejected range %r .. %r", start, end)
        raise InvalidRange(start, end)
    hours = _elapsed(start, end) // _HOUR
    return hours // 24


def _count_working_days(
    start: Instant,
    end: Instant,
    holidays: Iterable[HolidayLike],
    strict: bool,
) -> int:
    if end < start:
        if strict:
            logger.debug("working_days rejected range %r .. %r", start, end)
            raise InvalidRange(start, end)
        return 0
    return _count_busdays(date_range(start, end), holidays)


def working_days(
    start: Instant,
    end: Instant,
    holidays: Iterable[HolidayLike] = (),
) -> int:
    """
    Number of working days in the inclusive range ``[start, end]``.

    A working day is a Monday to Friday whose date is not in ``holidays``.
    Holidays are matched on calendar date only and must be given in the same
    zone as ``start`` and ``end``.

    Raises :class:`InvalidRange` if ``end`` precedes ``start``.
    """
    return _count_working_days(start, end, holidays, strict=True)


def business_days(
    start: Instant,
    end: Instant,
    holidays: Iterable[HolidayLike] = (),
) -> int:
    """Like :func:`working_days`, but an inverted range counts as 0."""
    return _count_working_days(start, end, holidays, strict=False)


def _hourly(start: datetime, end: datetime):
    # Only steps whose whole hour ends by ``end`` are produced.
    if start.tzinfo is None:
        step = start
        while True:
            following = _advance(step, _HOUR)
            if following is None or following > end:
                return
            yield step
            step = following
    # Aware instants advance in absolute hours and are classified in the
    # zone of ``start``.
    zone = start.tzinfo
    step = start.astimezone(timezone.utc)
    while True:
        following = _advance(step, _HOUR)
        if following is None or following > end:
            return
        yield step.astimezone(zone)
        step = following


def business_hours(
    start: Instant,
    end: Instant,
    holidays: Iterable[HolidayLike] = (),
) -> timedelta:
    """
    Total of the one-hour steps from ``start`` that begin on a working day.

    Steps are taken while the step is before ``end``, and a step only counts
    when its whole hour fits, so a final partial hour is dropped.  Every hour
    of a working day counts; there is no office-hours window.  Returns
    ``timedelta(0)`` unless ``start`` is strictly before ``end``.
    """
    start, end = _as_datetime(start), _as_datetime(end)
    if not start < end:
        return timedelta(0)
    steps = [s.date() for s in _hourly(start, end)]
    return _count_busdays(steps, holidays) * _HOUR


# ── stateful holder ──────────────────────────────────────────────────────

class HolidayCalendar:
    """
    A Mon–Fri working week with a mutable set of holiday dates.

    Basic usage::

        cal = HolidayCalendar([date(2024, 12, 25)])
        cal.add_holiday(date(2024, 12, 26))
        cal.working_days(date(2024, 12, 23), date(2024, 12, 27))   # → 3
    """

    def __init__(self, holidays: Optional[Iterable[HolidayLike]] = None) -> None:
        self._holidays: set[date] = set()
        for day in holidays or ():
            self.add_holiday(day)

    @staticmethod
    def _key(day: HolidayLike) -> date:
        return _as_day(day).astype(object)

    def add_holiday(self, day: HolidayLike) -> None:
        self._holidays.add(self._key(day))

    def remove_holiday(self, day: HolidayLike) -> None:
        self._holidays.discard(self._key(day))

    def __contains__(self, day: HolidayLike) -> bool:
        return self._key(day) in self._holidays

    def __len__(self) -> int:
        return len(self._holidays)

    def is_working_day(self, day: Instant) -> bool:
        return is_working_day(day, self._holidays)

    def working_days(self, start: Instant, end: Instant) -> int:
        return working_days(start, end, self._holidays)

    def business_days(self, start: Instant, end: Instant) -> int:
        return business_days(start, end, self._holidays)

    def business_hours(self, start: Instant, end: Instant) -> timedelta:
        return business_hours(start, end, self._holidays)

    @property
    def holidays(self) -> list[date]:
        return sorted(self._holidays)

    def __repr__(self) -> str:
        return (
            f"HolidayCalendar(weekmask={WEEKMASK!r}, "
            f"holidays={len(self._holidays)})"
        )
