from __future__ import annotations

from datetime import date
from enum import IntEnum


class Month(IntEnum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    def __str__(self) -> str:
        return MONTHS[self]


class Weekday(IntEnum):
    """Day of the week, counted from Sunday."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    def __str__(self) -> str:
        return WEEKDAYS[self]

    @property
    def is_weekend(self) -> bool:
        return self in (Weekday.SATURDAY, Weekday.SUNDAY)


# Indexed by Month; slot 0 is unused.
MONTHS: tuple[str, ...] = ("",) + tuple(m.name.capitalize() for m in Month)

WEEKDAYS: tuple[str, ...] = tuple(d.name.capitalize() for d in Weekday)

_DAYS_IN_MONTH: tuple[int, ...] = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def weekday_of(day: date) -> Weekday:
    # date.weekday() counts from Monday = 0
    return Weekday((day.weekday() + 1) % 7)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be in 1..12; got {month}.")
    if month == Month.FEBRUARY and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month]
