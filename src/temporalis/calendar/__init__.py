"""
temporalis.calendar
~~~~~~~~~~~~~~~~~~~

Calendar-day arithmetic over date ranges.  Saturday and Sunday are never
working days; any other day is one unless its date appears in a
caller-supplied holiday set.

Basic usage::

    from datetime import date
    from temporalis.calendar import working_days, date_range

    xmas = [date(2024, 12, 25), date(2024, 12, 26)]
    working_days(date(2024, 12, 23), date(2024, 12, 31), xmas)   # → 5
    date_range(date(2024, 2, 28), date(2024, 3, 1))              # 3 dates

Holidays are matched on (year, month, day) only.  For aware datetimes that
is the date in the instant's own zone, so normalise holidays and range
bounds to one zone before calling.

Public API
----------
working_days      Working-day count; raises InvalidRange on inverted bounds.
business_days     Same count; inverted bounds count as 0.
business_hours    Whole hours of the range that fall on working days.
date_range        Inclusive list of daily instants.
date_diff         Whole elapsed days; raises InvalidRange on inverted bounds.
is_working_day    The shared day predicate.
HolidayCalendar   Mutable holiday set with the same operations as methods.
CalendarError     Base exception for all calendar-related errors.
InvalidRange      End of a range precedes its start.
"""

from __future__ import annotations

from temporalis.calendar._exceptions import CalendarError, InvalidRange
from temporalis.calendar.calendar import (
    WEEKMASK,
    HolidayCalendar,
    business_days,
    business_hours,
    date_diff,
    date_range,
    is_working_day,
    working_days,
)
from temporalis.calendar.names import (
    MONTHS,
    WEEKDAYS,
    Month,
    Weekday,
    days_in_month,
    is_leap_year,
    weekday_of,
)

__all__ = [
    "WEEKMASK",
    "HolidayCalendar",
    "business_days",
    "business_hours",
    "date_diff",
    "date_range",
    "is_working_day",
    "working_days",
    "MONTHS",
    "WEEKDAYS",
    "Month",
    "Weekday",
    "days_in_month",
    "is_leap_year",
    "weekday_of",
    "CalendarError",
    "InvalidRange",
]
