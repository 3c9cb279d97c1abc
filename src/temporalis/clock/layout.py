from __future__ import annotations

from datetime import datetime

from .zone import ZoneLike, as_tzinfo

# strftime/strptime directives, not reference-time layouts.
DEFAULT_LAYOUT: str = "%Y-%m-%d %H:%M:%S"


def format_time(t: datetime, layout: str = DEFAULT_LAYOUT) -> str:
    return t.strftime(layout)


def parse(layout: str, value: str) -> datetime:
    """Parse ``value`` against ``layout``; raises ValueError on mismatch."""
    return datetime.strptime(value, layout)


def parse_time(value: str, layout: str = DEFAULT_LAYOUT) -> datetime:
    return parse(layout, value)


def parse_in_location(layout: str, value: str, location: ZoneLike) -> datetime:
    """
    Like :func:`parse`, but a result without an offset is placed in
    ``location``.  An offset present in ``value`` wins.
    """
    t = parse(layout, value)
    if t.tzinfo is None:
        t = t.replace(tzinfo=as_tzinfo(location))
    return t
