"""Instant parsing and the two ICS timestamp renderings.

``format_local`` gives wall-clock time in the calendar's zone (paired
with a ``TZID`` parameter), ``format_utc`` gives absolute UTC with a
trailing ``Z``. Keep them apart: DTSTART/DTEND use the former, DTSTAMP
the latter.
"""

from __future__ import annotations

from datetime import datetime, timezone

from dartcal.vtimezone import TIMEZONE, ZoneConfig, last_sunday


def parse_instant(text: str | None) -> datetime | None:
    """Parse an ISO-8601 timestamp such as ``2024-01-10T18:30:00.000Z``.

    Returns None for empty input. Timestamps without an offset stay naive
    and are read as local wall-clock time.
    """
    if not text:
        return None
    return datetime.fromisoformat(text.strip())


def _transition(year: int, month: int, zone: ZoneConfig) -> datetime:
    day = last_sunday(year, month)
    return datetime(
        day.year, day.month, day.day, zone.transition_utc_hour, tzinfo=timezone.utc
    )


def is_daylight(instant: datetime, zone: ZoneConfig = TIMEZONE) -> bool:
    """Whether an aware instant falls in the zone's daylight period."""
    utc = instant.astimezone(timezone.utc)
    start = _transition(utc.year, zone.daylight_month, zone)
    end = _transition(utc.year, zone.standard_month, zone)
    return start <= utc < end


def to_utc(instant: datetime, zone: ZoneConfig = TIMEZONE) -> datetime:
    """Normalize to an aware UTC datetime.

    Naive values are local wall-clock times in ``zone``; an ambiguous time
    in the autumn overlap resolves to its first (daylight) occurrence.
    """
    if instant.tzinfo is not None:
        return instant.astimezone(timezone.utc)
    candidate = (instant - zone.daylight_offset).replace(tzinfo=timezone.utc)
    if is_daylight(candidate, zone):
        return candidate
    return (instant - zone.standard_offset).replace(tzinfo=timezone.utc)


def to_local(instant: datetime, zone: ZoneConfig = TIMEZONE) -> datetime:
    """Convert to the zone's wall clock; naive values are already local."""
    if instant.tzinfo is None:
        return instant
    if is_daylight(instant, zone):
        offset, name = zone.daylight_offset, zone.daylight_name
    else:
        offset, name = zone.standard_offset, zone.standard_name
    return instant.astimezone(timezone(offset, name))


def format_local(instant: datetime, zone: ZoneConfig = TIMEZONE) -> str:
    """``YYYYMMDDTHHMMSS`` in local wall-clock time, no offset suffix."""
    return to_local(instant, zone).strftime("%Y%m%dT%H%M%S")


def format_utc(instant: datetime) -> str:
    """``YYYYMMDDTHHMMSSZ`` in UTC."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
