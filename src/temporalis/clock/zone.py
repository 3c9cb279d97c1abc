from __future__ import annotations

import logging
from datetime import datetime, timezone, tzinfo
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

ZoneLike = Union[str, tzinfo]


class TimezoneError(KeyError):
    """No timezone is known under the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown timezone {self.name!r}."


def local_zone() -> tzinfo:
    return datetime.now().astimezone().tzinfo


def load_location(name: str) -> tzinfo:
    """
    Look up a zone by IANA name.

    ``""`` and ``"UTC"`` give :data:`datetime.timezone.utc`; ``"Local"``
    gives the zone of the host clock.
    """
    if name in ("", "UTC"):
        return timezone.utc
    if name == "Local":
        return local_zone()
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        logger.debug("zone lookup failed for %r: %s", name, exc)
        raise TimezoneError(name) from exc


def as_tzinfo(zone: ZoneLike) -> tzinfo:
    if isinstance(zone, tzinfo):
        return zone
    return load_location(zone)


def convert_timezone(t: datetime, from_zone: ZoneLike, to_zone: ZoneLike) -> datetime:
    """
    Express ``t`` in ``to_zone``.

    A naive ``t`` is read as wall time in ``from_zone``.  An aware ``t``
    keeps its instant; ``from_zone`` then only validates the name.
    """
    src, dst = as_tzinfo(from_zone), as_tzinfo(to_zone)
    if t.tzinfo is None:
        t = t.replace(tzinfo=src)
    else:
        t = t.astimezone(src)
    return t.astimezone(dst)


def instant(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    microsecond: int = 0,
    tz: Optional[ZoneLike] = None,
) -> datetime:
    """Build a datetime; ``tz`` may be a zone name or a tzinfo."""
    return datetime(
        year, month, day, hour, minute, second, microsecond,
        tzinfo=None if tz is None else as_tzinfo(tz),
    )
