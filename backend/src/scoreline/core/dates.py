"""
Date and timezone helpers for league scoreboard queries.
"""

from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

DateLike = Union[date, datetime]

QUERY_DATE_FORMAT = "%Y%m%d"


def _calendar_date(value: DateLike) -> date:
    return value.date() if isinstance(value, datetime) else value


def to_local(value: DateLike, local_tz: Optional[tzinfo] = None) -> DateLike:
    """
    Render an instant in the caller's local zone.

    Plain dates and naive datetimes are already local wall-clock values and
    are returned unchanged. ``local_tz=None`` means the host's zone.
    """
    if isinstance(value, datetime) and value.tzinfo is not None:
        return value.astimezone(local_tz) if local_tz else value.astimezone()
    return value


def same_calendar_day(a: DateLike, b: DateLike) -> bool:
    """True iff year, month and day match in each value's own representation."""
    return (a.year, a.month, a.day) == (b.year, b.month, b.day)


def previous_day(day: DateLike) -> date:
    return _calendar_date(day) - timedelta(days=1)


def _zone(name: Optional[str]) -> Optional[tzinfo]:
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return None


def league_query_date(
    day: DateLike,
    league_timezone: Optional[str] = None,
    local_tz: Optional[tzinfo] = None,
) -> str:
    """
    The YYYYMMDD string for ``day`` as seen from the league's home timezone.

    The calendar date is pinned to local noon first so that DST shifts and
    UTC offsets cannot flip it across midnight. Unknown or missing timezones
    fall back to UTC formatting of the same instant.
    """
    noon = datetime.combine(_calendar_date(day), time(12, 0))
    if local_tz is not None:
        pinned = noon.replace(tzinfo=local_tz)
    else:
        pinned = noon.astimezone()

    zone = _zone(league_timezone) or timezone.utc
    return pinned.astimezone(zone).strftime(QUERY_DATE_FORMAT)
