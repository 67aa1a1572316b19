"""The one supported time zone and its VTIMEZONE block."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta


@dataclass(frozen=True)
class ZoneConfig:
    """A zone with one yearly standard/daylight rule pair.

    Both transitions happen on the last Sunday of their month at
    ``transition_utc_hour`` o'clock UTC.
    """

    tzid: str
    standard_name: str
    daylight_name: str
    standard_offset: timedelta
    daylight_offset: timedelta
    daylight_month: int
    standard_month: int
    transition_utc_hour: int = 1


TIMEZONE = ZoneConfig(
    tzid="Europe/Copenhagen",
    standard_name="CET",
    daylight_name="CEST",
    standard_offset=timedelta(hours=1),
    daylight_offset=timedelta(hours=2),
    daylight_month=3,
    standard_month=10,
)

# RRULE anchor year
_ANCHOR_YEAR = 1970


def last_sunday(year: int, month: int) -> date:
    last = date(year, month, calendar.monthrange(year, month)[1])
    return last - timedelta(days=(last.weekday() + 1) % 7)


def format_offset(offset: timedelta) -> str:
    """Render an offset as ``+HHMM``."""
    minutes = int(offset.total_seconds() // 60)
    sign = "+" if minutes >= 0 else "-"
    hours, minutes = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}{minutes:02d}"


def _observance(
    kind: str,
    name: str,
    offset_from: timedelta,
    offset_to: timedelta,
    month: int,
    utc_hour: int,
) -> list[str]:
    # DTSTART is the local time just before the switch, i.e. in offset_from
    day = last_sunday(_ANCHOR_YEAR, month)
    local_hour = utc_hour + int(offset_from.total_seconds() // 3600)
    return [
        f"BEGIN:{kind}",
        f"TZOFFSETFROM:{format_offset(offset_from)}",
        f"TZOFFSETTO:{format_offset(offset_to)}",
        f"TZNAME:{name}",
        f"DTSTART:{day:%Y%m%d}T{local_hour:02d}0000",
        f"RRULE:FREQ=YEARLY;BYMONTH={month};BYDAY=-1SU",
        f"END:{kind}",
    ]


def build_vtimezone(zone: ZoneConfig = TIMEZONE) -> list[str]:
    """Return the VTIMEZONE block for ``zone`` as logical lines."""
    return [
        "BEGIN:VTIMEZONE",
        f"TZID:{zone.tzid}",
        *_observance(
            "STANDARD",
            zone.standard_name,
            zone.daylight_offset,
            zone.standard_offset,
            zone.standard_month,
            zone.transition_utc_hour,
        ),
        *_observance(
            "DAYLIGHT",
            zone.daylight_name,
            zone.standard_offset,
            zone.daylight_offset,
            zone.daylight_month,
            zone.transition_utc_hour,
        ),
        "END:VTIMEZONE",
    ]
